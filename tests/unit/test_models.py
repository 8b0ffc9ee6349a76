"""Unit tests for dotscribe.models."""

import pytest

from dotscribe.attributes import AttributeSet, PortPosition
from dotscribe.builder import GraphBuilder
from dotscribe.exporters.dot import render
from dotscribe.models import Edge, Graph, Node, SubGraph


class TestFrozenAttributes:
    def test_node_attributes_are_read_only(self) -> None:
        graph = GraphBuilder("G").add_node("a", {"shape": "box"}).build()
        before = render(graph)
        with pytest.raises(TypeError, match="read-only"):
            graph.nodes[0].attributes.set("color", "red")
        assert render(graph) == before

    def test_graph_default_sets_are_read_only(self) -> None:
        graph = GraphBuilder("G").graph_attr("rankdir", "LR").build()
        for attrs in (graph.graph_attributes, graph.node_attributes, graph.edge_attributes):
            with pytest.raises(TypeError):
                attrs.set("label", "x")

    def test_caller_set_is_copied(self) -> None:
        attrs = AttributeSet.of({"shape": "box"})
        node = Node("a", attrs)
        graph = GraphBuilder("G").add_node(node).build()
        attrs.set("color", "red")
        assert "color" not in graph.nodes[0].attributes
        assert render(graph) == "digraph G {\n    a [shape=box];\n}\n"
        assert not attrs.is_frozen

    def test_edge_and_subgraph_sets_are_frozen(self) -> None:
        edge = Edge("a", "b", AttributeSet.of({"style": "dashed"}))
        sub = SubGraph("cluster_x", graph_attributes=AttributeSet.of({"label": "x"}))
        assert edge.attributes.is_frozen
        assert sub.graph_attributes.is_frozen


class TestFieldValidation:
    def test_node_rejects_plain_dict(self) -> None:
        with pytest.raises(ValueError, match="AttributeSet"):
            Node("a", {"shape": "box"})  # type: ignore[arg-type]

    def test_node_rejects_non_string_id(self) -> None:
        with pytest.raises(ValueError, match="node identifier"):
            Node(1)  # type: ignore[arg-type]

    def test_graph_rejects_non_string_comment(self) -> None:
        with pytest.raises(ValueError, match="comment"):
            Graph(comment=5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("field_name", ["directed", "strict"])
    def test_graph_flags_must_be_bool(self, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            Graph(**{field_name: "false"})

    def test_graph_rejects_bare_node_names(self) -> None:
        with pytest.raises(ValueError, match="Node values"):
            Graph(nodes=("a",))  # type: ignore[arg-type]

    def test_subgraph_rejects_wrong_members(self) -> None:
        with pytest.raises(ValueError, match="Edge values"):
            SubGraph(edges=(("a", "b"),))  # type: ignore[arg-type]

    def test_members_must_be_a_sequence(self) -> None:
        with pytest.raises(ValueError, match="must be a tuple"):
            Graph(nodes=Node("a"))  # type: ignore[arg-type]

    def test_list_members_become_tuples(self) -> None:
        graph = Graph(nodes=[Node("a")])  # type: ignore[arg-type]
        assert graph.nodes == (Node("a"),)

    def test_edge_rejects_string_port(self) -> None:
        with pytest.raises(ValueError, match="port"):
            Edge("a", "b", source_port="p")  # type: ignore[arg-type]

    def test_edge_accepts_port_position(self) -> None:
        edge = Edge("a", "b", target_port=PortPosition("in"))
        assert edge.target_port == PortPosition("in")
