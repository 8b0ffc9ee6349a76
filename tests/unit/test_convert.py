"""Unit tests for dotscribe.convert."""

import networkx as nx
import pytest

from dotscribe.attributes import InvalidAttributeValue
from dotscribe.convert import from_networkx
from dotscribe.exporters.dot import render


class TestFromNetworkx:
    def test_directed(self) -> None:
        g = nx.DiGraph(name="flow")
        g.add_edge("a", "b")
        graph = from_networkx(g)
        assert graph.directed is True
        assert render(graph) == "digraph flow {\n    a;\n    b;\n    a -> b;\n}\n"

    def test_undirected(self) -> None:
        g = nx.Graph()
        g.add_edge(1, 2)
        graph = from_networkx(g)
        assert graph.directed is False
        assert graph.name is None
        assert "    1 -- 2;\n" in render(graph)

    def test_name_override(self) -> None:
        g = nx.DiGraph(name="flow")
        assert from_networkx(g, name="other").name == "other"

    def test_strict(self) -> None:
        assert from_networkx(nx.DiGraph(), strict=True).strict is True

    def test_data_becomes_attributes(self) -> None:
        g = nx.DiGraph()
        g.add_node("a", shape="box", color="red")
        g.add_edge("a", "b", weight=3, style="dashed")
        graph = from_networkx(g)
        assert graph.nodes[0].attributes.render() == "[shape=box, color=red]"
        assert graph.edges[0].attributes.render() == "[weight=3, style=dashed]"

    def test_graph_defaults(self) -> None:
        g = nx.DiGraph()
        g.graph["graph"] = {"rankdir": "LR"}
        g.graph["node"] = {"shape": "circle"}
        g.graph["edge"] = {"color": "gray"}
        graph = from_networkx(g)
        assert graph.graph_attributes.render() == "[rankdir=LR]"
        assert graph.node_attributes.render() == "[shape=circle]"
        assert graph.edge_attributes.render() == "[color=gray]"

    def test_insertion_order(self) -> None:
        g = nx.DiGraph()
        g.add_nodes_from(["z", "a", "m"])
        assert [n.id for n in from_networkx(g).nodes] == ["z", "a", "m"]

    def test_invalid_data(self) -> None:
        g = nx.DiGraph()
        g.add_node("a", color="notacolor")
        with pytest.raises(InvalidAttributeValue):
            from_networkx(g)

    def test_multigraph_parallel_edges(self) -> None:
        g = nx.MultiDiGraph()
        g.add_edge("a", "b", label="first")
        g.add_edge("a", "b", label="second")
        graph = from_networkx(g)
        assert [e.attributes.get("label").text for e in graph.edges] == ["first", "second"]
