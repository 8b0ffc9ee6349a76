"""dotscribe: typed construction and rendering of Graphviz DOT documents."""

__version__ = "0.1.0"

from dotscribe.attributes import (  # noqa: E402
    AttributeSet,
    Boolean,
    Color,
    ColorList,
    EscString,
    HtmlLabel,
    InvalidAttributeValue,
    Keyword,
    KeywordList,
    ListValue,
    Number,
    PlainString,
    Point,
    PortPosition,
    Rect,
    Spline,
    ViewPort,
    WeightedColor,
    attribute_value,
)
from dotscribe.builder import EdgeBuilder, GraphBuilder, NodeBuilder, SubGraphBuilder  # noqa: E402
from dotscribe.exporters.dot import dump, render  # noqa: E402
from dotscribe.identifiers import escape, format_id, unescape  # noqa: E402
from dotscribe.models import Edge, Graph, Node, SubGraph  # noqa: E402

__all__ = [
    "AttributeSet",
    "Boolean",
    "Color",
    "ColorList",
    "Edge",
    "EdgeBuilder",
    "EscString",
    "Graph",
    "GraphBuilder",
    "HtmlLabel",
    "InvalidAttributeValue",
    "Keyword",
    "KeywordList",
    "ListValue",
    "Node",
    "NodeBuilder",
    "Number",
    "PlainString",
    "Point",
    "PortPosition",
    "Rect",
    "Spline",
    "SubGraph",
    "SubGraphBuilder",
    "ViewPort",
    "WeightedColor",
    "__version__",
    "attribute_value",
    "dump",
    "escape",
    "format_id",
    "render",
    "unescape",
]
