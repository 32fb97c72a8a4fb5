"""Graph writers: node-link JSON and GML (pretty and compact).

All writers take a text sink and perform only sequential writes; wrap the
sink in a buffer for large graphs. Errors raised by the sink propagate
unchanged. Writing the same graph twice yields identical output.
"""

import json
from typing import IO, Any

from strsim_network.graph.types import Graph, Link, Node


def write_node_link_json(graph: Graph, sink: IO[str]) -> None:
    """Write ``{"nodes": [...], "links": [...]}`` as compact JSON."""
    json.dump(
        graph.to_dict(),
        sink,
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )


def read_node_link_json(source: IO[str]) -> Graph:
    """Load a Graph written by ``write_node_link_json``."""
    data = json.load(source)
    return Graph(
        nodes=tuple(Node(id=n["id"], label=n["label"]) for n in data["nodes"]),
        links=tuple(
            Link(source=e["source"], target=e["target"], weight=e["weight"])
            for e in data["links"]
        ),
    )


def _gml_string(label: str) -> str:
    # GML strings cannot contain a raw double quote
    return label.replace("&", "&amp;").replace('"', "&quot;")


def _gml_number(value: Any) -> str:
    return str(value)


def write_gml_pretty(graph: Graph, sink: IO[str]) -> None:
    """Write GML with one key per line and two-space indentation."""
    sink.write("graph [\n  multigraph 0\n")
    for node in graph.nodes:
        sink.write(
            f"  node [\n    id {node.id}\n"
            f'    label "{_gml_string(node.label)}"\n  ]\n'
        )
    for link in graph.links:
        sink.write(
            f"  edge [\n    source {link.source}\n    target {link.target}\n"
            f"    weight {_gml_number(link.weight)}\n  ]\n"
        )
    sink.write("]\n")


def write_gml(graph: Graph, sink: IO[str]) -> None:
    """Write GML on a single line with no insignificant whitespace."""
    sink.write("graph[multigraph 0 ")
    for node in graph.nodes:
        sink.write(f'node[id {node.id} label "{_gml_string(node.label)}"]')
    for link in graph.links:
        sink.write(
            f"edge[source {link.source} target {link.target} "
            f"weight {_gml_number(link.weight)}]"
        )
    sink.write("]")
