"""Node-link graph data structures."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Node:
    id: int
    label: str  # the caller's string object, not a copy


@dataclass(frozen=True, slots=True)
class Link:
    source: int  # COO row
    target: int  # COO col
    weight: Any


@dataclass(frozen=True, slots=True)
class Graph:
    """Immutable node-link view of a distance matrix.

    One node per input string in input order, one link per retained pair
    in COO order.
    """

    nodes: tuple[Node, ...]
    links: tuple[Link, ...]

    def to_dict(self) -> dict[str, Any]:
        """Node-link document as consumed by d3's forceSimulation."""
        return {
            "nodes": [{"id": n.id, "label": n.label} for n in self.nodes],
            "links": [
                {"source": e.source, "target": e.target, "weight": e.weight}
                for e in self.links
            ],
        }
