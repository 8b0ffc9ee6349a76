"""Build graph values from YAML or JSON graph descriptions.

A description looks like::

    name: example
    directed: true
    graph: {rankdir: LR}
    node: {shape: box}
    nodes:
      - N0
      - id: N1
        attrs: {label: {html: "<b>N1</b>"}}
    edges:
      - [N0, N1]
      - {source: N1, target: N0, source_port: "p:sw", attrs: {style: dashed}}
    subgraphs:
      - name: cluster_0
        nodes: [a0, a1]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from dotscribe.attributes import (
    EscString,
    HtmlLabel,
    InvalidAttributeValue,
    PortPosition,
)
from dotscribe.builder import EdgeBuilder, GraphBuilder, NodeBuilder, SubGraphBuilder
from dotscribe.models import Graph


class GraphDescriptionError(Exception):
    """Raised when a graph description is malformed."""


def load_graph_file(path: Path) -> Graph:
    """Load a ``.json``, ``.yaml`` or ``.yml`` graph description."""
    try:
        content = path.read_text()
    except OSError as exc:
        raise GraphDescriptionError(f"Cannot read {path}: {exc}") from exc

    if path.suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise GraphDescriptionError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise GraphDescriptionError(f"Invalid YAML in {path}: {exc}") from exc

    return graph_from_mapping(data)


def graph_from_mapping(data: Any) -> Graph:
    """Build a Graph from a parsed description."""
    if not isinstance(data, dict):
        raise GraphDescriptionError("Graph description must be a mapping")

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        name = str(name)
    directed = data.get("directed", True)
    strict = data.get("strict", False)
    for key, flag in (("directed", directed), ("strict", strict)):
        if not isinstance(flag, bool):
            raise GraphDescriptionError(f"'{key}' must be true or false, got {flag!r}")
    builder = GraphBuilder(name, directed=directed)
    builder.strict(strict)
    if data.get("comment") is not None:
        builder.comment(str(data["comment"]))

    _fill_body(builder, data, "graph")
    return builder.build()


def _fill_body(builder: GraphBuilder | SubGraphBuilder, data: dict[str, Any], context: str) -> None:
    for key, setter in (
        ("graph", builder.graph_attr),
        ("node", builder.node_attr),
        ("edge", builder.edge_attr),
    ):
        for name, raw in _mapping(data.get(key), f"{context}.{key}").items():
            _apply(setter, name, raw, f"{context}.{key}")

    for i, sub_data in enumerate(_sequence(data.get("subgraphs"), f"{context}.subgraphs")):
        sub_context = f"{context}.subgraphs[{i}]"
        if not isinstance(sub_data, dict):
            raise GraphDescriptionError(f"{sub_context}: expected a mapping")
        sub_name = sub_data.get("name")
        sub = SubGraphBuilder(None if sub_name is None else str(sub_name))
        _fill_body(sub, sub_data, sub_context)
        builder.add_subgraph(sub)

    for i, node_data in enumerate(_sequence(data.get("nodes"), f"{context}.nodes")):
        builder.add_node(_node(node_data, f"{context}.nodes[{i}]"))

    for i, edge_data in enumerate(_sequence(data.get("edges"), f"{context}.edges")):
        builder.add_edge(_edge(edge_data, f"{context}.edges[{i}]"))


def _node(data: Any, context: str) -> NodeBuilder:
    if isinstance(data, (str, int, float)) and not isinstance(data, bool):
        return NodeBuilder(str(data))
    if not isinstance(data, dict) or "id" not in data:
        raise GraphDescriptionError(f"{context}: expected a node id or a mapping with 'id'")
    node = NodeBuilder(str(data["id"]))
    for name, raw in _mapping(data.get("attrs"), f"{context}.attrs").items():
        _apply(node.attr, name, raw, context)
    return node


def _edge(data: Any, context: str) -> EdgeBuilder:
    if isinstance(data, list):
        if len(data) != 2:
            raise GraphDescriptionError(f"{context}: expected [source, target]")
        return EdgeBuilder(str(data[0]), str(data[1]))
    if not isinstance(data, dict) or "source" not in data or "target" not in data:
        raise GraphDescriptionError(f"{context}: expected a mapping with 'source' and 'target'")

    edge = EdgeBuilder(str(data["source"]), str(data["target"]))
    try:
        if data.get("source_port") is not None:
            port = PortPosition.parse(str(data["source_port"]))
            edge.source_port(port.port, port.compass)
        if data.get("target_port") is not None:
            port = PortPosition.parse(str(data["target_port"]))
            edge.target_port(port.port, port.compass)
    except InvalidAttributeValue as exc:
        raise GraphDescriptionError(f"{context}: {exc}") from exc

    for name, raw in _mapping(data.get("attrs"), f"{context}.attrs").items():
        _apply(edge.attr, name, raw, context)
    return edge


def _apply(setter: Any, name: Any, raw: Any, context: str) -> None:
    try:
        setter(str(name), description_value(raw))
    except InvalidAttributeValue as exc:
        raise GraphDescriptionError(f"{context}: {exc}") from exc


def description_value(raw: Any) -> Any:
    """Translate ``{html: ...}`` and ``{esc: ...}`` markers into label values."""
    if isinstance(raw, dict):
        if set(raw) == {"html"}:
            return HtmlLabel(str(raw["html"]))
        if set(raw) == {"esc"}:
            return EscString(str(raw["esc"]))
    return raw


def _mapping(value: Any, context: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise GraphDescriptionError(f"{context}: expected a mapping")
    return value


def _sequence(value: Any, context: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise GraphDescriptionError(f"{context}: expected a list")
    return value
