"""Node-link graph model built from a distance matrix, and its writers."""

from strsim_network.graph.build import coo_to_graph
from strsim_network.graph.serialization import (
    read_node_link_json,
    write_gml,
    write_gml_pretty,
    write_node_link_json,
)
from strsim_network.graph.types import Graph, Link, Node

__all__ = [
    "Graph",
    "Link",
    "Node",
    "coo_to_graph",
    "read_node_link_json",
    "write_gml",
    "write_gml_pretty",
    "write_node_link_json",
]
