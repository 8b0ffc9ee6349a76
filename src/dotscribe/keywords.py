"""Enumerated keyword families and the attributes that draw from them.

The accepted keyword lists are data, not code: families can be extended at
runtime with :func:`register_keywords` or from a YAML file with
:func:`load_keyword_file`. Lookups are case-insensitive and return the
canonical spelling of the keyword.
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml


class KeywordFileError(Exception):
    """Raised when a keyword file cannot be read or has the wrong shape."""


BUILTIN_FAMILIES: dict[str, tuple[str, ...]] = {
    "shape": (
        "box", "polygon", "ellipse", "oval", "circle", "point", "egg",
        "triangle", "plaintext", "plain", "diamond", "trapezium",
        "parallelogram", "house", "pentagon", "hexagon", "septagon",
        "octagon", "doublecircle", "doubleoctagon", "tripleoctagon",
        "invtriangle", "invtrapezium", "invhouse", "Mdiamond", "Msquare",
        "Mcircle", "rect", "rectangle", "square", "star", "none",
        "underline", "cylinder", "note", "tab", "folder", "box3d",
        "component", "promoter", "cds", "terminator", "utr", "primersite",
        "restrictionsite", "fivepoverhang", "threepoverhang", "noverhang",
        "assembly", "signature", "insulator", "ribosite", "rnastab",
        "proteasesite", "proteinstab", "rpromoter", "rarrow", "larrow",
        "lpromoter", "record", "Mrecord",
    ),
    "style": (
        "solid", "dashed", "dotted", "bold", "rounded", "diagonals",
        "filled", "striped", "wedged", "invis", "radial", "tapered",
    ),
    "arrowType": (
        "normal", "inv", "dot", "invdot", "odot", "invodot", "none", "tee",
        "empty", "invempty", "diamond", "odiamond", "ediamond", "crow",
        "box", "obox", "open", "halfopen", "vee", "curve", "icurve",
    ),
    "rankdir": ("TB", "LR", "BT", "RL"),
    "dirType": ("forward", "back", "both", "none"),
    "clusterMode": ("local", "global", "none"),
    "ordering": ("in", "out"),
    "outputMode": ("breadthfirst", "nodesfirst", "edgesfirst"),
    "packMode": ("node", "clust", "graph"),
    "pagedir": ("BL", "BR", "TL", "TR", "RB", "RT", "LB", "LT"),
    "ratio": ("fill", "compress", "expand", "auto"),
    "splines": ("none", "line", "false", "polyline", "curved", "ortho", "spline", "true"),
    "labeljust": ("l", "r", "c"),
    "labelloc": ("t", "c", "b"),
    "imagepos": ("tl", "tc", "tr", "ml", "mc", "mr", "bl", "bc", "br"),
    "imagescale": ("false", "true", "width", "height", "both"),
    "compass": ("n", "ne", "e", "se", "s", "sw", "w", "nw", "c", "_"),
}

# Attribute name -> keyword family.
ATTRIBUTE_FAMILIES: dict[str, str] = {
    "shape": "shape",
    "style": "style",
    "arrowhead": "arrowType",
    "arrowtail": "arrowType",
    "rankdir": "rankdir",
    "dir": "dirType",
    "clusterrank": "clusterMode",
    "ordering": "ordering",
    "outputorder": "outputMode",
    "packmode": "packMode",
    "pagedir": "pagedir",
    "ratio": "ratio",
    "splines": "splines",
    "labeljust": "labeljust",
    "labelloc": "labelloc",
    "imagepos": "imagepos",
    "imagescale": "imagescale",
}

_ARROW_SHAPES = "box|crow|curve|icurve|diamond|dot|inv|none|normal|tee|vee"

# Families whose domain is a grammar rather than a fixed list.
_PATTERNS: dict[str, re.Pattern[str]] = {
    "arrowType": re.compile(rf"(?:o?[lr]?(?:{_ARROW_SHAPES})){{1,4}}"),
    "style": re.compile(r"setlinewidth\([0-9]+(?:\.[0-9]+)?\)"),
    "packMode": re.compile(r"array(?:_[tblrcu]+)?[0-9]*"),
}

_registry: dict[str, dict[str, str]] = {}


def reset_keywords() -> None:
    """Restore the built-in keyword families, dropping registered extras."""
    _registry.clear()
    for family, values in BUILTIN_FAMILIES.items():
        register_keywords(family, values)


def register_keywords(family: str, values: list[str] | tuple[str, ...]) -> None:
    """Add ``values`` to ``family``, creating the family if needed."""
    entries = _registry.setdefault(family, {})
    for value in values:
        if not isinstance(value, str) or not value:
            raise ValueError(f"Keyword for family '{family}' must be a non-empty string")
        entries.setdefault(value.lower(), value)


def families() -> list[str]:
    return sorted(_registry)


def keywords(family: str) -> list[str]:
    """Return the accepted keywords of ``family`` in registration order."""
    if family not in _registry:
        raise KeyError(family)
    return list(_registry[family].values())


def family_for_attribute(name: str) -> str | None:
    return ATTRIBUTE_FAMILIES.get(name)


def canonical_keyword(family: str, value: str) -> str | None:
    """Return the canonical spelling of ``value`` in ``family``, or None."""
    entries = _registry.get(family)
    if entries is None:
        return None
    lowered = value.lower()
    if lowered in entries:
        return entries[lowered]
    pattern = _PATTERNS.get(family)
    if pattern is not None and pattern.fullmatch(lowered):
        return lowered
    return None


def load_keyword_file(path: Path) -> dict[str, list[str]]:
    """Register the keyword families listed in a YAML file.

    The file maps family names to lists of keywords::

        shape:
          - mycustomshape
    """
    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise KeywordFileError(f"Cannot read keyword file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise KeywordFileError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise KeywordFileError(f"Invalid keyword file {path}: expected mapping")

    loaded: dict[str, list[str]] = {}
    for family, values in raw.items():
        if not isinstance(values, list) or not all(isinstance(v, str) and v for v in values):
            raise KeywordFileError(
                f"Invalid keyword file {path}: '{family}' must be a list of strings"
            )
        register_keywords(str(family), values)
        loaded[str(family)] = list(values)
    return loaded


reset_keywords()
