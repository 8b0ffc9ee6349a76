"""Fluent builders that assemble immutable graph values.

Builders own mutable attribute sets while a graph is being put together;
``build()`` hands out copies, so later changes to a builder never leak into
a graph that was already built.
"""

from __future__ import annotations

from typing import Any

from dotscribe.attributes import (
    AttributeSet,
    HtmlLabel,
    KeywordList,
    Point,
    PortPosition,
)
from dotscribe.models import Edge, Graph, Node, SubGraph


class _AttributeBuilder:
    """Attribute helpers shared by node and edge builders."""

    def __init__(self) -> None:
        self.attributes = AttributeSet()

    def attr(self, name: str, value: Any) -> _AttributeBuilder:
        self.attributes.set(name, value)
        return self

    def attrs(self, attributes: dict[str, Any]) -> _AttributeBuilder:
        for name, value in attributes.items():
            self.attributes.set(name, value)
        return self

    def label(self, text: str) -> _AttributeBuilder:
        return self.attr("label", text)

    def html_label(self, markup: str) -> _AttributeBuilder:
        return self.attr("label", HtmlLabel(markup))

    def color(self, color: Any) -> _AttributeBuilder:
        return self.attr("color", color)

    def font_color(self, color: Any) -> _AttributeBuilder:
        return self.attr("fontcolor", color)

    def font_name(self, name: str) -> _AttributeBuilder:
        return self.attr("fontname", name)

    def font_size(self, size: float) -> _AttributeBuilder:
        return self.attr("fontsize", size)

    def pen_width(self, width: float) -> _AttributeBuilder:
        return self.attr("penwidth", width)

    def style(self, *styles: str) -> _AttributeBuilder:
        if len(styles) == 1:
            return self.attr("style", styles[0])
        return self.attr("style", KeywordList("style", styles))

    def tooltip(self, text: str) -> _AttributeBuilder:
        return self.attr("tooltip", text)


class NodeBuilder(_AttributeBuilder):
    def __init__(self, node_id: str) -> None:
        super().__init__()
        self.node_id = node_id

    def shape(self, shape: str) -> NodeBuilder:
        return self.attr("shape", shape)

    def fill_color(self, color: Any) -> NodeBuilder:
        return self.attr("fillcolor", color)

    def width(self, width: float) -> NodeBuilder:
        return self.attr("width", width)

    def height(self, height: float) -> NodeBuilder:
        return self.attr("height", height)

    def pos(self, x: float, y: float, fixed: bool = False) -> NodeBuilder:
        return self.attr("pos", Point(x, y, fixed=fixed))

    def build(self) -> Node:
        return Node(self.node_id, self.attributes.copy())


class EdgeBuilder(_AttributeBuilder):
    def __init__(self, source: str, target: str) -> None:
        super().__init__()
        self.source = source
        self.target = target
        self._source_port: PortPosition | None = None
        self._target_port: PortPosition | None = None

    def source_port(self, port: str | None = None, compass: str | None = None) -> EdgeBuilder:
        """Attach the edge to ``source:port:compass`` in the edge statement."""
        self._source_port = PortPosition(port, compass)
        return self

    def target_port(self, port: str | None = None, compass: str | None = None) -> EdgeBuilder:
        self._target_port = PortPosition(port, compass)
        return self

    def head_port(self, port: str | None = None, compass: str | None = None) -> EdgeBuilder:
        """Set the ``headport`` attribute instead of decorating the endpoint."""
        return self.attr("headport", PortPosition(port, compass))

    def tail_port(self, port: str | None = None, compass: str | None = None) -> EdgeBuilder:
        return self.attr("tailport", PortPosition(port, compass))

    def arrow_head(self, arrow: str) -> EdgeBuilder:
        return self.attr("arrowhead", arrow)

    def arrow_tail(self, arrow: str) -> EdgeBuilder:
        return self.attr("arrowtail", arrow)

    def arrow_size(self, size: float) -> EdgeBuilder:
        return self.attr("arrowsize", size)

    def direction(self, direction: str) -> EdgeBuilder:
        return self.attr("dir", direction)

    def weight(self, weight: float) -> EdgeBuilder:
        return self.attr("weight", weight)

    def build(self) -> Edge:
        return Edge(
            self.source,
            self.target,
            self.attributes.copy(),
            source_port=self._source_port,
            target_port=self._target_port,
        )


class _BodyBuilder:
    """Statements shared by graphs and subgraphs."""

    def __init__(self) -> None:
        self.graph_attributes = AttributeSet()
        self.node_attributes = AttributeSet()
        self.edge_attributes = AttributeSet()
        self.subgraphs: list[SubGraph] = []
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []

    def graph_attr(self, name: str, value: Any) -> _BodyBuilder:
        self.graph_attributes.set(name, value)
        return self

    def node_attr(self, name: str, value: Any) -> _BodyBuilder:
        """Set a default attribute for every node (``node [...]``)."""
        self.node_attributes.set(name, value)
        return self

    def edge_attr(self, name: str, value: Any) -> _BodyBuilder:
        """Set a default attribute for every edge (``edge [...]``)."""
        self.edge_attributes.set(name, value)
        return self

    def add_node(
        self, node: Node | NodeBuilder | str, attributes: dict[str, Any] | None = None
    ) -> _BodyBuilder:
        if isinstance(node, NodeBuilder):
            node = node.build()
        elif isinstance(node, str):
            node = Node(node, AttributeSet.of(attributes))
        self.nodes.append(node)
        return self

    def add_edge(
        self,
        edge: Edge | EdgeBuilder | str,
        target: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> _BodyBuilder:
        if isinstance(edge, EdgeBuilder):
            edge = edge.build()
        elif isinstance(edge, str):
            if target is None:
                raise ValueError(f"Edge from '{edge}' needs a target")
            edge = Edge(edge, target, AttributeSet.of(attributes))
        self.edges.append(edge)
        return self

    def add_subgraph(self, subgraph: SubGraph | SubGraphBuilder) -> _BodyBuilder:
        if isinstance(subgraph, SubGraphBuilder):
            subgraph = subgraph.build()
        self.subgraphs.append(subgraph)
        return self

    def rank_dir(self, rank_dir: str) -> _BodyBuilder:
        return self.graph_attr("rankdir", rank_dir)

    def label(self, text: str) -> _BodyBuilder:
        return self.graph_attr("label", text)


class SubGraphBuilder(_BodyBuilder):
    def __init__(self, name: str | None = None) -> None:
        super().__init__()
        self.name = name

    def build(self) -> SubGraph:
        return SubGraph(
            name=self.name,
            graph_attributes=self.graph_attributes.copy(),
            node_attributes=self.node_attributes.copy(),
            edge_attributes=self.edge_attributes.copy(),
            subgraphs=tuple(self.subgraphs),
            nodes=tuple(self.nodes),
            edges=tuple(self.edges),
        )


class GraphBuilder(_BodyBuilder):
    def __init__(self, name: str | None = None, directed: bool = True) -> None:
        super().__init__()
        self.name = name
        self.directed = directed
        self._strict = False
        self._comment: str | None = None

    @classmethod
    def new_directed(cls, name: str | None = None) -> GraphBuilder:
        return cls(name, directed=True)

    @classmethod
    def new_undirected(cls, name: str | None = None) -> GraphBuilder:
        return cls(name, directed=False)

    def strict(self, strict: bool = True) -> GraphBuilder:
        self._strict = strict
        return self

    def comment(self, comment: str) -> GraphBuilder:
        self._comment = comment
        return self

    def build(self) -> Graph:
        return Graph(
            name=self.name,
            directed=self.directed,
            strict=self._strict,
            comment=self._comment,
            graph_attributes=self.graph_attributes.copy(),
            node_attributes=self.node_attributes.copy(),
            edge_attributes=self.edge_attributes.copy(),
            subgraphs=tuple(self.subgraphs),
            nodes=tuple(self.nodes),
            edges=tuple(self.edges),
        )
