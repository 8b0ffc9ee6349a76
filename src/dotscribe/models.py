"""Core data models for dotscribe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dotscribe.attributes import AttributeSet, PortPosition


def _check_id(kind: str, value: object) -> None:
    if not isinstance(value, str):
        raise ValueError(f"Invalid {kind} identifier: {value!r}")


def _freeze_attributes(owner: object, name: str) -> None:
    value = getattr(owner, name)
    if not isinstance(value, AttributeSet):
        raise ValueError(
            f"{type(owner).__name__}.{name} must be an AttributeSet, got {type(value).__name__}"
        )
    object.__setattr__(owner, name, value.frozen())


def _check_members(owner: object, name: str, kind: type) -> None:
    values: Any = getattr(owner, name)
    if not isinstance(values, (tuple, list)):
        raise ValueError(
            f"{type(owner).__name__}.{name} must be a tuple, got {type(values).__name__}"
        )
    for value in values:
        if not isinstance(value, kind):
            raise ValueError(
                f"{type(owner).__name__}.{name} must contain {kind.__name__} values, "
                f"got {type(value).__name__}"
            )
    object.__setattr__(owner, name, tuple(values))


def _check_port(kind: str, value: object) -> None:
    if value is not None and not isinstance(value, PortPosition):
        raise ValueError(f"Invalid {kind} port: {value!r}")


@dataclass(frozen=True)
class Node:
    """A node statement: identifier plus its own attributes."""

    id: str
    attributes: AttributeSet = field(default_factory=AttributeSet)

    def __post_init__(self) -> None:
        _check_id("node", self.id)
        _freeze_attributes(self, "attributes")


@dataclass(frozen=True)
class Edge:
    """An edge statement between two node identifiers.

    Endpoints are plain names; nothing checks that a node with that name
    was declared.
    """

    source: str
    target: str
    attributes: AttributeSet = field(default_factory=AttributeSet)
    source_port: PortPosition | None = None
    target_port: PortPosition | None = None

    def __post_init__(self) -> None:
        _check_id("edge source", self.source)
        _check_id("edge target", self.target)
        _freeze_attributes(self, "attributes")
        _check_port("edge source", self.source_port)
        _check_port("edge target", self.target_port)


def _check_body(body: SubGraph | Graph) -> None:
    for name in ("graph_attributes", "node_attributes", "edge_attributes"):
        _freeze_attributes(body, name)
    _check_members(body, "subgraphs", SubGraph)
    _check_members(body, "nodes", Node)
    _check_members(body, "edges", Edge)


@dataclass(frozen=True)
class SubGraph:
    name: str | None = None
    graph_attributes: AttributeSet = field(default_factory=AttributeSet)
    node_attributes: AttributeSet = field(default_factory=AttributeSet)
    edge_attributes: AttributeSet = field(default_factory=AttributeSet)
    subgraphs: tuple[SubGraph, ...] = ()
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        if self.name is not None:
            _check_id("subgraph", self.name)
        _check_body(self)


@dataclass(frozen=True)
class Graph:
    """A complete graph, ready to be rendered.

    Attribute sets are frozen copies, so nothing done to the sets a graph
    was built from changes it afterwards.
    """

    name: str | None = None
    directed: bool = True
    strict: bool = False
    comment: str | None = None
    graph_attributes: AttributeSet = field(default_factory=AttributeSet)
    node_attributes: AttributeSet = field(default_factory=AttributeSet)
    edge_attributes: AttributeSet = field(default_factory=AttributeSet)
    subgraphs: tuple[SubGraph, ...] = ()
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        if self.name is not None:
            _check_id("graph", self.name)
        if not isinstance(self.directed, bool):
            raise ValueError(f"Graph.directed must be a bool, got {self.directed!r}")
        if not isinstance(self.strict, bool):
            raise ValueError(f"Graph.strict must be a bool, got {self.strict!r}")
        if self.comment is not None and not isinstance(self.comment, str):
            raise ValueError(f"Graph.comment must be a string, got {self.comment!r}")
        _check_body(self)

    @property
    def keyword(self) -> str:
        return "digraph" if self.directed else "graph"

    @property
    def edge_op(self) -> str:
        return "->" if self.directed else "--"


@dataclass
class RenderConfig:
    """Project configuration for dotscribe."""

    version: str = "0.1.0"
    indent: int = 4
    keyword_files: list[str] = field(default_factory=list)
