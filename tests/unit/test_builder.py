"""Unit tests for dotscribe.builder."""

import pytest

from dotscribe.attributes import (
    Color,
    HtmlLabel,
    InvalidAttributeValue,
    Keyword,
    Point,
    PortPosition,
)
from dotscribe.builder import EdgeBuilder, GraphBuilder, NodeBuilder, SubGraphBuilder
from dotscribe.exporters.dot import render
from dotscribe.models import Node


class TestNodeBuilder:
    def test_typed_helpers(self) -> None:
        node = (
            NodeBuilder("N0")
            .shape("box")
            .label("start")
            .color("red")
            .fill_color("#00FF00")
            .style("filled", "rounded")
            .build()
        )
        assert node.id == "N0"
        assert node.attributes.get("shape") == Keyword("shape", "box")
        assert node.attributes.get("fillcolor") == Color("#00ff00")
        assert node.attributes.render() == (
            '[shape=box, label=start, color=red, fillcolor="#00ff00", style="filled,rounded"]'
        )

    def test_html_label(self) -> None:
        node = NodeBuilder("n").html_label("<i>x</i>").build()
        assert node.attributes.get("label") == HtmlLabel("<i>x</i>")

    def test_pos(self) -> None:
        node = NodeBuilder("n").pos(1, 2, fixed=True).build()
        assert node.attributes.get("pos") == Point(1, 2, fixed=True)

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(InvalidAttributeValue):
            NodeBuilder("n").height(0.0)

    def test_build_copies_attributes(self) -> None:
        builder = NodeBuilder("n").label("first")
        node = builder.build()
        builder.label("second")
        assert node.attributes.get("label").text == "first"


class TestEdgeBuilder:
    def test_ports(self) -> None:
        edge = EdgeBuilder("a", "b").source_port("p0", "sw").target_port(compass="n").build()
        assert edge.source_port == PortPosition("p0", "sw")
        assert edge.target_port == PortPosition(None, "n")

    def test_port_attributes(self) -> None:
        edge = EdgeBuilder("a", "b").head_port("in", "w").tail_port(compass="e").build()
        assert edge.attributes.render() == '[headport="in:w", tailport=e]'

    def test_arrows(self) -> None:
        edge = EdgeBuilder("a", "b").arrow_head("ODOT").arrow_tail("none").direction("both").build()
        assert edge.attributes.render() == "[arrowhead=odot, arrowtail=none, dir=both]"

    def test_arrow_size_minimum(self) -> None:
        with pytest.raises(InvalidAttributeValue):
            EdgeBuilder("a", "b").arrow_size(-1)


class TestGraphBuilder:
    def test_example_document(self) -> None:
        graph = GraphBuilder.new_directed("example").add_node("N0").add_node("N1").add_edge("N0", "N1").build()
        assert render(graph) == "digraph example {\n    N0;\n    N1;\n    N0 -> N1;\n}\n"

    def test_undirected(self) -> None:
        graph = GraphBuilder.new_undirected().add_edge("a", "b").build()
        assert graph.directed is False
        assert render(graph) == "graph {\n    a -- b;\n}\n"

    def test_strict_and_comment(self) -> None:
        graph = GraphBuilder("G").strict().comment("generated").build()
        assert graph.strict is True
        assert render(graph).startswith("// generated\nstrict digraph G {\n")

    def test_defaults(self) -> None:
        graph = (
            GraphBuilder("G")
            .rank_dir("lr")
            .label("title")
            .node_attr("shape", "circle")
            .edge_attr("color", "blue")
            .build()
        )
        assert graph.graph_attributes.render() == "[rankdir=LR, label=title]"
        assert graph.node_attributes.render() == "[shape=circle]"
        assert graph.edge_attributes.render() == "[color=blue]"

    def test_add_node_with_attributes(self) -> None:
        graph = GraphBuilder().add_node("n", {"color": "red"}).add_node(Node("m")).build()
        assert [n.id for n in graph.nodes] == ["n", "m"]
        assert graph.nodes[0].attributes.render() == "[color=red]"

    def test_add_node_invalid_attribute(self) -> None:
        builder = GraphBuilder()
        with pytest.raises(InvalidAttributeValue):
            builder.add_node("n", {"color": "notacolor"})
        assert builder.nodes == []

    def test_edge_needs_target(self) -> None:
        with pytest.raises(ValueError, match="needs a target"):
            GraphBuilder().add_edge("a")

    def test_add_builders(self) -> None:
        graph = (
            GraphBuilder()
            .add_node(NodeBuilder("a").shape("box"))
            .add_edge(EdgeBuilder("a", "b").weight(2))
            .build()
        )
        assert graph.nodes[0].attributes.render() == "[shape=box]"
        assert graph.edges[0].attributes.render() == "[weight=2]"

    def test_subgraph(self) -> None:
        cluster = SubGraphBuilder("cluster_x").label("X").add_node("x1").node_attr("style", "filled")
        graph = GraphBuilder("G").add_subgraph(cluster).build()
        sub = graph.subgraphs[0]
        assert sub.name == "cluster_x"
        assert [n.id for n in sub.nodes] == ["x1"]
        assert sub.node_attributes.render() == "[style=filled]"

    def test_build_is_snapshot(self) -> None:
        builder = GraphBuilder("G").add_node("a").graph_attr("label", "one")
        graph = builder.build()
        builder.add_node("b").graph_attr("label", "two")
        assert [n.id for n in graph.nodes] == ["a"]
        assert graph.graph_attributes.get("label").text == "one"
