"""Typed DOT attribute values and ordered attribute sets.

Every value variant validates its input when it is constructed and raises
:class:`InvalidAttributeValue` for anything outside its domain. Once built,
``render()`` always succeeds and returns the exact text that follows ``=``
in an attribute list.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterator

from dotscribe.colors import normalize_color
from dotscribe.identifiers import escape_esc_string, format_id
from dotscribe.keywords import canonical_keyword, family_for_attribute


class InvalidAttributeValue(ValueError):
    """Raised when a value is outside the accepted domain of an attribute family."""

    def __init__(self, family: str, value: object, reason: str = "") -> None:
        self.family = family
        self.value = value
        self.reason = reason
        message = f"Invalid {family} value {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def format_number(value: int | float) -> str:
    """Format a number as a DOT numeral: no exponent, no trailing zeros."""
    if isinstance(value, int):
        return str(value)
    # Expand the shortest round-trip repr without an exponent.
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _check_number(family: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidAttributeValue(family, value, "expected a number")
    if not math.isfinite(value):
        raise InvalidAttributeValue(family, value, "must be finite")
    return value


def _check_text(family: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidAttributeValue(family, value, "expected a string")
    return value


@dataclass(frozen=True)
class PlainString:
    """A string that is quoted only when it is not a bare identifier."""

    value: str

    def __post_init__(self) -> None:
        _check_text("string", self.value)

    @property
    def text(self) -> str:
        return self.value

    def render(self) -> str:
        return format_id(self.value)


@dataclass(frozen=True)
class EscString:
    """A graphviz escString: ``\\n``, ``\\l``, ``\\N`` etc. are kept as written."""

    value: str

    def __post_init__(self) -> None:
        _check_text("escString", self.value)

    @property
    def text(self) -> str:
        return self.value

    def render(self) -> str:
        return f'"{escape_esc_string(self.value)}"'


@dataclass(frozen=True)
class HtmlLabel:
    """HTML-like label markup, written verbatim between ``<`` and ``>``."""

    value: str

    def __post_init__(self) -> None:
        _check_text("html", self.value)
        depth = 0
        for char in self.value:
            if char == "<":
                depth += 1
            elif char == ">":
                depth -= 1
                if depth < 0:
                    break
        if depth != 0:
            raise InvalidAttributeValue("html", self.value, "unbalanced angle brackets")

    @property
    def text(self) -> str:
        return self.value

    def render(self) -> str:
        return f"<{self.value}>"


@dataclass(frozen=True)
class Number:
    value: int | float
    minimum: float | None = None
    family: str = "number"

    def __post_init__(self) -> None:
        number = _check_number(self.family, self.value)
        if self.minimum is not None and number < self.minimum:
            raise InvalidAttributeValue(
                self.family,
                self.value,
                f"must be greater than or equal to {format_number(self.minimum)}",
            )

    @property
    def text(self) -> str:
        return format_number(self.value)

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise InvalidAttributeValue("bool", self.value, "expected true or false")

    @property
    def text(self) -> str:
        return "true" if self.value else "false"

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Keyword:
    """A keyword from a closed family such as ``shape`` or ``rankdir``.

    The keyword is stored in its canonical spelling, so ``Keyword("shape",
    "MDIAMOND").value == "Mdiamond"``.
    """

    family: str
    value: str

    def __post_init__(self) -> None:
        _check_text(self.family, self.value)
        canonical = canonical_keyword(self.family, self.value)
        if canonical is None:
            raise InvalidAttributeValue(self.family, self.value, "unknown keyword")
        object.__setattr__(self, "value", canonical)

    @property
    def text(self) -> str:
        return self.value

    def render(self) -> str:
        return format_id(self.value)


@dataclass(frozen=True)
class KeywordList:
    """Comma-separated keywords from one family, e.g. ``style="filled,rounded"``."""

    family: str
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.values, str) or not self.values:
            raise InvalidAttributeValue(self.family, self.values, "expected a non-empty list")
        canonical = tuple(Keyword(self.family, v).value for v in self.values)
        object.__setattr__(self, "values", canonical)

    @property
    def text(self) -> str:
        return ",".join(self.values)

    def render(self) -> str:
        return format_id(self.text)


@dataclass(frozen=True)
class Color:
    """A single color: X11 name, ``#rrggbb[aa]``, HSV triple or ``/scheme/name``."""

    value: str

    def __post_init__(self) -> None:
        _check_text("color", self.value)
        normalized = normalize_color(self.value)
        if normalized is None:
            raise InvalidAttributeValue("color", self.value, "not a recognized color")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls("#" + "".join(_channel(c) for c in (red, green, blue)))

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: int) -> Color:
        return cls("#" + "".join(_channel(c) for c in (red, green, blue, alpha)))

    @classmethod
    def hsv(cls, hue: float, saturation: float, value: float) -> Color:
        parts = [_check_number("color", c) for c in (hue, saturation, value)]
        if not all(0.0 <= c <= 1.0 for c in parts):
            raise InvalidAttributeValue(
                "color", (hue, saturation, value), "HSV components must be within 0..1"
            )
        return cls(" ".join(format_number(c) for c in parts))

    @property
    def text(self) -> str:
        return self.value

    def render(self) -> str:
        return format_id(self.value)


def _channel(component: int) -> str:
    if isinstance(component, bool) or not isinstance(component, int) or not 0 <= component <= 255:
        raise InvalidAttributeValue("color", component, "channel must be an integer within 0..255")
    return f"{component:02x}"


@dataclass(frozen=True)
class WeightedColor:
    color: Color
    weight: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            object.__setattr__(self, "color", Color(self.color))
        if self.weight is not None:
            weight = _check_number("colorList", self.weight)
            if not 0.0 <= weight <= 1.0:
                raise InvalidAttributeValue("colorList", self.weight, "weight must be within 0..1")

    @property
    def text(self) -> str:
        if self.weight is None:
            return self.color.text
        return f"{self.color.text};{format_number(self.weight)}"


@dataclass(frozen=True)
class ColorList:
    """Colon-separated weighted colors, e.g. ``"yellow;0.3:blue"``."""

    colors: tuple[WeightedColor, ...]

    def __post_init__(self) -> None:
        if isinstance(self.colors, str) or not self.colors:
            raise InvalidAttributeValue("colorList", self.colors, "expected at least one color")
        entries = tuple(_weighted(c) for c in self.colors)
        total = sum(e.weight for e in entries if e.weight is not None)
        # Tolerate float noise such as 0.1 + 0.2 + 0.7.
        if total > 1.0 + 1e-9:
            raise InvalidAttributeValue("colorList", self.colors, "weights must sum to at most 1")
        object.__setattr__(self, "colors", entries)

    @classmethod
    def parse(cls, spec: str) -> ColorList:
        """Parse ``"C(;F)?(:C(;F)?)*"`` into a ColorList."""
        _check_text("colorList", spec)
        entries: list[WeightedColor] = []
        for part in spec.split(":"):
            name, sep, weight = part.partition(";")
            if not sep:
                entries.append(WeightedColor(Color(name)))
                continue
            try:
                parsed = float(weight)
            except ValueError:
                raise InvalidAttributeValue("colorList", spec, f"bad weight {weight!r}") from None
            entries.append(WeightedColor(Color(name), parsed))
        return cls(tuple(entries))

    @property
    def text(self) -> str:
        return ":".join(c.text for c in self.colors)

    def render(self) -> str:
        return format_id(self.text)


def _weighted(entry: Any) -> WeightedColor:
    if isinstance(entry, WeightedColor):
        return entry
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        return WeightedColor(entry[0], entry[1])
    return WeightedColor(entry)


_POINT = re.compile(r"\s*([^,!]+),([^,!]+)(?:,([^,!]+))?\s*(!?)\s*")


@dataclass(frozen=True)
class Point:
    """``x,y[,z][!]``; the trailing ``!`` pins the node position."""

    x: float
    y: float
    z: float | None = None
    fixed: bool = False

    def __post_init__(self) -> None:
        for component in (self.x, self.y) if self.z is None else (self.x, self.y, self.z):
            _check_number("point", component)

    @classmethod
    def parse(cls, spec: str) -> Point:
        match = _POINT.fullmatch(_check_text("point", spec))
        if match is None:
            raise InvalidAttributeValue("point", spec, "expected 'x,y[,z][!]'")
        try:
            x, y = float(match.group(1)), float(match.group(2))
            z = float(match.group(3)) if match.group(3) is not None else None
        except ValueError:
            raise InvalidAttributeValue("point", spec, "coordinates must be numbers") from None
        return cls(x, y, z, fixed=bool(match.group(4)))

    @property
    def text(self) -> str:
        coordinates = [self.x, self.y] if self.z is None else [self.x, self.y, self.z]
        joined = ",".join(format_number(c) for c in coordinates)
        return f"{joined}!" if self.fixed else joined

    def render(self) -> str:
        return format_id(self.text)


@dataclass(frozen=True)
class Rect:
    """``llx,lly,urx,ury``: lower-left and upper-right corners in points."""

    llx: float
    lly: float
    urx: float
    ury: float

    def __post_init__(self) -> None:
        for component in (self.llx, self.lly, self.urx, self.ury):
            _check_number("rect", component)
        if self.urx < self.llx or self.ury < self.lly:
            raise InvalidAttributeValue(
                "rect", (self.llx, self.lly, self.urx, self.ury),
                "upper-right corner must not be below or left of lower-left corner",
            )

    @classmethod
    def parse(cls, spec: str) -> Rect:
        parts = _check_text("rect", spec).split(",")
        if len(parts) != 4:
            raise InvalidAttributeValue("rect", spec, "expected 'llx,lly,urx,ury'")
        try:
            llx, lly, urx, ury = (float(p) for p in parts)
        except ValueError:
            raise InvalidAttributeValue("rect", spec, "coordinates must be numbers") from None
        return cls(llx, lly, urx, ury)

    @property
    def text(self) -> str:
        return ",".join(format_number(c) for c in (self.llx, self.lly, self.urx, self.ury))

    def render(self) -> str:
        return format_id(self.text)


@dataclass(frozen=True)
class Spline:
    """Spline control points with optional start (``s,``) and end (``e,``) points."""

    points: tuple[Point, ...]
    start: Point | None = None
    end: Point | None = None

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) % 3 != 1:
            raise InvalidAttributeValue("splineType", self.points, "expected 3n+1 control points")
        for point in (*points, self.start, self.end):
            if point is None:
                continue
            if not isinstance(point, Point):
                raise InvalidAttributeValue("splineType", point, "expected a Point")
            # Spline points are plain x,y pairs.
            if point.z is not None or point.fixed:
                raise InvalidAttributeValue(
                    "splineType", point, "control points cannot carry z or '!'"
                )
        object.__setattr__(self, "points", points)

    @property
    def text(self) -> str:
        parts: list[str] = []
        if self.end is not None:
            parts.append(f"e,{format_number(self.end.x)},{format_number(self.end.y)}")
        if self.start is not None:
            parts.append(f"s,{format_number(self.start.x)},{format_number(self.start.y)}")
        parts.extend(p.text for p in self.points)
        return " ".join(parts)

    def render(self) -> str:
        return format_id(self.text)


@dataclass(frozen=True)
class ViewPort:
    """``W,H,Z`` optionally followed by a focus point ``x,y`` or a node name."""

    width: float
    height: float
    zoom: float = 1.0
    focus: Point | str | None = None

    def __post_init__(self) -> None:
        for component in (self.width, self.height, self.zoom):
            _check_number("viewPort", component)
        if isinstance(self.focus, str) and "'" in self.focus:
            raise InvalidAttributeValue("viewPort", self.focus, "node focus cannot contain a quote")
        if self.focus is not None and not isinstance(self.focus, (Point, str)):
            raise InvalidAttributeValue("viewPort", self.focus, "focus must be a Point or node name")

    @property
    def text(self) -> str:
        text = ",".join(format_number(c) for c in (self.width, self.height, self.zoom))
        if isinstance(self.focus, Point):
            text += f",{format_number(self.focus.x)},{format_number(self.focus.y)}"
        elif isinstance(self.focus, str):
            text += f",'{self.focus}'"
        return text

    def render(self) -> str:
        return format_id(self.text)


@dataclass(frozen=True)
class PortPosition:
    """Where an edge attaches to a node: ``port``, ``port:compass`` or ``compass``."""

    port: str | None = None
    compass: str | None = None

    def __post_init__(self) -> None:
        if self.port is None and self.compass is None:
            raise InvalidAttributeValue("portPos", None, "expected a port name or compass point")
        if self.port is not None:
            _check_text("portPos", self.port)
            if not self.port:
                raise InvalidAttributeValue("portPos", self.port, "port name cannot be empty")
        if self.compass is not None:
            object.__setattr__(self, "compass", Keyword("compass", self.compass).value)

    @classmethod
    def parse(cls, spec: str) -> PortPosition:
        """Parse ``"port"``, ``"port:compass"`` or a bare compass point."""
        port, sep, compass = _check_text("portPos", spec).rpartition(":")
        if sep:
            return cls(port, compass)
        if canonical_keyword("compass", spec) is not None:
            return cls(compass=spec)
        return cls(spec)

    @property
    def text(self) -> str:
        if self.port is None:
            return self.compass or ""
        if self.compass is None:
            return self.port
        return f"{self.port}:{self.compass}"

    def render(self) -> str:
        return format_id(self.text)


_LIST_SEPARATORS = (",", " ", ":", ";")


@dataclass(frozen=True)
class ListValue:
    """A list of strings joined by one of the separators DOT attributes use."""

    items: tuple[str, ...]
    separator: str = ","

    def __post_init__(self) -> None:
        if isinstance(self.items, str):
            raise InvalidAttributeValue("list", self.items, "expected a list of strings")
        items = tuple(self.items)
        for item in items:
            _check_text("list", item)
        if self.separator not in _LIST_SEPARATORS:
            raise InvalidAttributeValue("list", self.separator, "unsupported separator")
        object.__setattr__(self, "items", items)

    @property
    def text(self) -> str:
        return self.separator.join(self.items)

    def render(self) -> str:
        return format_id(self.text)


AttributeValue = (
    PlainString | EscString | HtmlLabel | Number | Boolean | Keyword | KeywordList
    | Color | ColorList | Point | Rect | Spline | ViewPort | PortPosition | ListValue
)

VALUE_TYPES = (
    PlainString, EscString, HtmlLabel, Number, Boolean, Keyword, KeywordList,
    Color, ColorList, Point, Rect, Spline, ViewPort, PortPosition, ListValue,
)

COLOR_ATTRIBUTES = frozenset({
    "color", "fillcolor", "fontcolor", "bgcolor", "pencolor", "labelfontcolor",
})

POINT_ATTRIBUTES = frozenset({
    "pos", "lp", "xlp", "head_lp", "tail_lp", "size", "page", "pad", "margin",
})

PORT_ATTRIBUTES = frozenset({"headport", "tailport"})

NUMERIC_MINIMUMS: dict[str, float] = {
    "arrowsize": 0.0,
    "fontsize": 1.0,
    "labelfontsize": 1.0,
    "height": 0.02,
    "width": 0.01,
    "penwidth": 0.0,
    "weight": 0.0,
    "peripheries": 0.0,
    "sides": 3.0,
    "nodesep": 0.02,
    "skew": -100.0,
    "distortion": -100.0,
}


def attribute_value(name: str, value: Any) -> AttributeValue:
    """Coerce a plain Python value into the variant ``name`` expects.

    Values that already are attribute values are returned unchanged.
    """
    if isinstance(value, VALUE_TYPES):
        return value

    if name in COLOR_ATTRIBUTES:
        if isinstance(value, str):
            return ColorList.parse(value) if ":" in value or ";" in value else Color(value)
        if isinstance(value, (list, tuple)):
            return ColorList(tuple(value))

    if name in NUMERIC_MINIMUMS:
        return Number(value, minimum=NUMERIC_MINIMUMS[name], family=name)

    if name in PORT_ATTRIBUTES and isinstance(value, str):
        return PortPosition.parse(value)

    if name == "bb":
        if isinstance(value, str):
            return Rect.parse(value)
        if isinstance(value, (list, tuple)) and len(value) == 4:
            return Rect(*value)

    if name in POINT_ATTRIBUTES:
        if isinstance(value, str):
            return Point.parse(value)
        if isinstance(value, (list, tuple)) and len(value) in (2, 3):
            return Point(*value)

    family = family_for_attribute(name)
    if family is not None:
        if family == "style" and isinstance(value, str) and "," in value:
            return KeywordList(family, tuple(v.strip() for v in value.split(",")))
        if isinstance(value, str):
            return Keyword(family, value)
        if family == "style" and isinstance(value, (list, tuple)):
            return KeywordList(family, tuple(value))

    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value, family=name)
    if isinstance(value, str):
        return PlainString(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ListValue(tuple(value))
    raise InvalidAttributeValue(name, value, f"unsupported value type {type(value).__name__}")


@dataclass
class AttributeSet:
    """Attributes in insertion order; setting an existing name replaces its value.

    Values only enter through :meth:`set`, so every stored value is a
    validated variant. A set placed in a graph value is frozen and rejects
    further changes.
    """

    _items: dict[str, AttributeValue] = field(default_factory=dict, init=False)
    _frozen: bool = field(default=False, init=False, compare=False, repr=False)

    @classmethod
    def of(cls, attributes: dict[str, Any] | None = None) -> AttributeSet:
        result = cls()
        for name, value in (attributes or {}).items():
            result.set(name, value)
        return result

    def set(self, name: str, value: Any) -> AttributeSet:
        self._check_mutable()
        if not isinstance(name, str) or not name:
            raise InvalidAttributeValue("attribute name", name, "expected a non-empty string")
        self._items[name] = attribute_value(name, value)
        return self

    def get(self, name: str) -> AttributeValue | None:
        return self._items.get(name)

    def remove(self, name: str) -> None:
        self._check_mutable()
        self._items.pop(name, None)

    def frozen(self) -> AttributeSet:
        """Return a read-only copy; ``set`` and ``remove`` on it raise TypeError."""
        result = self.copy()
        result._frozen = True
        return result

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("AttributeSet is read-only once it belongs to a graph value")

    def names(self) -> list[str]:
        return list(self._items)

    def items(self) -> list[tuple[str, AttributeValue]]:
        return list(self._items.items())

    def copy(self) -> AttributeSet:
        """Return a mutable copy. Stored values are already validated."""
        result = AttributeSet()
        result._items = dict(self._items)
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def render(self) -> str:
        """Render as ``[a=1, b=2]``; an empty set renders as an empty string."""
        if not self._items:
            return ""
        body = ", ".join(f"{format_id(name)}={value.render()}" for name, value in self._items.items())
        return f"[{body}]"
