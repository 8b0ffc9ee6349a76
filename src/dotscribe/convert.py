"""Conversion from networkx graphs."""

from __future__ import annotations

import networkx as nx

from dotscribe.builder import GraphBuilder
from dotscribe.models import Graph


def from_networkx(nx_graph: nx.Graph, name: str | None = None, strict: bool = False) -> Graph:
    """Convert a networkx graph into a Graph.

    Node and edge data dicts become attribute sets. Graph-level defaults are
    read from ``nx_graph.graph["graph"]``, ``["node"]`` and ``["edge"]``, the
    same keys pydot and pygraphviz use. Multigraph edge keys are dropped.
    """
    if name is None and nx_graph.name:
        name = str(nx_graph.name)
    builder = GraphBuilder(name, directed=nx_graph.is_directed())
    builder.strict(strict)

    for key, setter in (
        ("graph", builder.graph_attr),
        ("node", builder.node_attr),
        ("edge", builder.edge_attr),
    ):
        for attr_name, value in nx_graph.graph.get(key, {}).items():
            setter(attr_name, value)

    for node_id, data in nx_graph.nodes(data=True):
        builder.add_node(str(node_id), dict(data))

    for source, target, data in nx_graph.edges(data=True):
        builder.add_edge(str(source), str(target), dict(data))

    return builder.build()

