"""Conversion from a coordinate matrix to a node-link graph."""

from typing import Sequence

from strsim_network.graph.types import Graph, Link, Node
from strsim_network.matrix.types import CooMatrix


def coo_to_graph(coo: CooMatrix, strings: Sequence[str]) -> Graph:
    """Pair each string with its index and each COO entry with a link.

    Links are source=row, target=col, weight=value, in COO order. Labels
    reference the strings in ``strings`` directly.
    """
    nodes = tuple(Node(id=i, label=s) for i, s in enumerate(strings))
    links = tuple(
        Link(source=c.row, target=c.col, weight=c.value) for c in coo.entries
    )
    return Graph(nodes=nodes, links=links)
