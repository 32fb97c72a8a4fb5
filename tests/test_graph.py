"""Tests for the node-link graph model and its writers."""

import io
import json
from collections import Counter

import networkx as nx
import pytest

from strsim_network.graph import (
    Graph,
    Link,
    Node,
    coo_to_graph,
    read_node_link_json,
    write_gml,
    write_gml_pretty,
    write_node_link_json,
)
from strsim_network.matrix import build_coo_matrix
from strsim_network.oracle.algorithms import jaro, levenshtein

SCENARIO = ["AA", "AB", "XX", "XY", "YY", "QQ"]


def scenario_graph() -> Graph:
    coo = build_coo_matrix(SCENARIO, 1, 1, levenshtein, n_workers=1)
    return coo_to_graph(coo, SCENARIO)


def pair_graph() -> Graph:
    coo = build_coo_matrix(["AA", "AB"], 1, 1, levenshtein, n_workers=1)
    return coo_to_graph(coo, ["AA", "AB"])


def render(writer, graph: Graph) -> str:
    buf = io.StringIO()
    writer(graph, buf)
    return buf.getvalue()


class TestCooToGraph:
    """Nodes follow input order; links follow COO order."""

    def test_nodes(self):
        graph = scenario_graph()
        assert [(n.id, n.label) for n in graph.nodes] == list(enumerate(SCENARIO))

    def test_labels_reference_input_strings(self):
        strings = ["".join(["ab", "c"]), "".join(["ab", "d"])]
        coo = build_coo_matrix(strings, 0, 5, levenshtein, n_workers=1)
        graph = coo_to_graph(coo, strings)
        assert all(n.label is s for n, s in zip(graph.nodes, strings))

    def test_links(self):
        graph = scenario_graph()
        assert graph.links == (
            Link(source=1, target=0, weight=1),
            Link(source=3, target=2, weight=1),
            Link(source=4, target=3, weight=1),
        )

    def test_isolated_nodes_kept(self):
        graph = scenario_graph()
        assert len(graph.nodes) == 6
        linked = {e.source for e in graph.links} | {e.target for e in graph.links}
        assert 5 not in linked


class TestNodeLinkJson:
    """Node-link JSON document for force-directed layouts."""

    def test_exact_document(self):
        assert render(write_node_link_json, pair_graph()) == (
            '{"nodes":[{"id":0,"label":"AA"},{"id":1,"label":"AB"}],'
            '"links":[{"source":1,"target":0,"weight":1}]}'
        )

    def test_round_trip(self):
        graph = scenario_graph()
        loaded = read_node_link_json(io.StringIO(render(write_node_link_json, graph)))

        assert len(loaded.nodes) == len(graph.nodes)
        assert len(loaded.links) == len(graph.links)
        assert Counter(
            (e.source, e.target, e.weight) for e in loaded.links
        ) == Counter((e.source, e.target, e.weight) for e in graph.links)
        assert loaded == graph

    def test_byte_identical_rewrite(self):
        graph = scenario_graph()
        assert render(write_node_link_json, graph) == render(
            write_node_link_json, graph
        )

    def test_unicode_labels_unescaped(self):
        graph = Graph(nodes=(Node(0, "café"),), links=())
        out = render(write_node_link_json, graph)
        assert "café" in out
        assert json.loads(out)["nodes"][0]["label"] == "café"


class TestGml:
    """Pretty and compact GML layouts."""

    def test_pretty_exact(self):
        assert render(write_gml_pretty, pair_graph()) == (
            "graph [\n"
            "  multigraph 0\n"
            "  node [\n"
            "    id 0\n"
            '    label "AA"\n'
            "  ]\n"
            "  node [\n"
            "    id 1\n"
            '    label "AB"\n'
            "  ]\n"
            "  edge [\n"
            "    source 1\n"
            "    target 0\n"
            "    weight 1\n"
            "  ]\n"
            "]\n"
        )

    def test_compact_exact(self):
        assert render(write_gml, pair_graph()) == (
            'graph[multigraph 0 node[id 0 label "AA"]node[id 1 label "AB"]'
            "edge[source 1 target 0 weight 1]]"
        )

    def test_empty_graph(self):
        empty = Graph(nodes=(), links=())
        assert render(write_gml_pretty, empty) == "graph [\n  multigraph 0\n]\n"
        assert render(write_gml, empty) == "graph[multigraph 0 ]"

    def test_float_weights(self):
        graph = Graph(
            nodes=(Node(0, "a"), Node(1, "b")),
            links=(Link(source=1, target=0, weight=0.5),),
        )
        assert "weight 0.5" in render(write_gml_pretty, graph)
        assert "weight 0.5]" in render(write_gml, graph)

    def test_quotes_escaped(self):
        graph = Graph(nodes=(Node(0, 'say "hi" & go'),), links=())
        out = render(write_gml, graph)
        assert 'label "say &quot;hi&quot; &amp; go"' in out

    @pytest.mark.parametrize("writer", [write_gml_pretty, write_gml])
    def test_parsed_by_networkx(self, writer):
        g = nx.parse_gml(render(writer, scenario_graph()), label="id")
        assert sorted(g.nodes) == list(range(6))
        assert [g.nodes[i]["label"] for i in range(6)] == SCENARIO
        assert sorted(
            (max(u, v), min(u, v), d["weight"]) for u, v, d in g.edges(data=True)
        ) == [(1, 0, 1), (3, 2, 1), (4, 3, 1)]

    def test_pretty_and_compact_describe_same_graph(self):
        strings = ["MARTHA", "MARHTA", 'O"BRIEN', "O'BRIEN", "DIXON"]
        coo = build_coo_matrix(strings, 0.5, 1.0, jaro, n_workers=1)
        graph = coo_to_graph(coo, strings)

        pretty = nx.parse_gml(render(write_gml_pretty, graph), label="id")
        compact = nx.parse_gml(render(write_gml, graph), label="id")

        assert dict(pretty.nodes(data=True)) == dict(compact.nodes(data=True))
        assert sorted(pretty.edges(data="weight")) == sorted(
            compact.edges(data="weight")
        )
        assert pretty.nodes[2]["label"] == 'O"BRIEN'

    def test_byte_identical_rewrite(self):
        graph = scenario_graph()
        assert render(write_gml_pretty, graph) == render(write_gml_pretty, graph)
        assert render(write_gml, graph) == render(write_gml, graph)

    def test_write_error_propagates(self):
        class BrokenPipe(io.StringIO):
            def write(self, s: str) -> int:
                raise BrokenPipeError(32, "Broken pipe")

        with pytest.raises(OSError):
            write_gml_pretty(scenario_graph(), BrokenPipe())
