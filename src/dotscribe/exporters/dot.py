"""Graphviz DOT rendering for graph values."""

from __future__ import annotations

from typing import BinaryIO

from dotscribe.attributes import PortPosition
from dotscribe.identifiers import format_id
from dotscribe.models import Edge, Graph, Node, SubGraph

INDENT = "    "


def render(graph: Graph, indent: str = INDENT) -> str:
    """Render a Graph as a complete DOT document.

    Statements are written in a fixed order: graph/node/edge attribute
    statements, subgraphs, nodes, then edges, each group in insertion order.
    """
    lines: list[str] = []

    if graph.comment is not None:
        lines.extend(f"// {line}" for line in graph.comment.splitlines() or [""])

    header = f"strict {graph.keyword}" if graph.strict else graph.keyword
    if graph.name is not None:
        header += f" {format_id(graph.name)}"
    lines.append(f"{header} {{")

    _render_body(lines, graph, graph.edge_op, indent, 1)

    lines.append("}")
    return "\n".join(lines) + "\n"


def dump(graph: Graph, sink: BinaryIO, indent: str = INDENT, encoding: str = "utf-8") -> None:
    """Render a Graph and write the encoded document to a binary sink."""
    sink.write(render(graph, indent=indent).encode(encoding))


def _render_body(
    lines: list[str],
    body: Graph | SubGraph,
    edge_op: str,
    indent: str,
    level: int,
) -> None:
    prefix = indent * level

    for keyword, attributes in (
        ("graph", body.graph_attributes),
        ("node", body.node_attributes),
        ("edge", body.edge_attributes),
    ):
        if attributes:
            lines.append(f"{prefix}{keyword} {attributes.render()};")

    for sub in body.subgraphs:
        header = "subgraph" if sub.name is None else f"subgraph {format_id(sub.name)}"
        lines.append(f"{prefix}{header} {{")
        _render_body(lines, sub, edge_op, indent, level + 1)
        lines.append(f"{prefix}}}")
        lines.append("")

    for node in body.nodes:
        lines.append(f"{prefix}{_node_statement(node)}")

    for edge in body.edges:
        lines.append(f"{prefix}{_edge_statement(edge, edge_op)}")


def _node_statement(node: Node) -> str:
    return f"{format_id(node.id)}{_trailing(node.attributes.render())};"


def _edge_statement(edge: Edge, edge_op: str) -> str:
    source = _endpoint(edge.source, edge.source_port)
    target = _endpoint(edge.target, edge.target_port)
    return f"{source} {edge_op} {target}{_trailing(edge.attributes.render())};"


def _endpoint(node_id: str, port: PortPosition | None) -> str:
    text = format_id(node_id)
    if port is None:
        return text
    if port.port is not None:
        text += f":{format_id(port.port)}"
    if port.compass is not None:
        text += f":{port.compass}"
    return text


def _trailing(attribute_list: str) -> str:
    return f" {attribute_list}" if attribute_list else ""
