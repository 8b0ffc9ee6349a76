"""Color value parsing: X11 color names, RGB(A) hex and HSV triples."""

from __future__ import annotations

import re

# X11 names that also come in numbered variants, e.g. "antiquewhite3".
_NUMBERED = (
    "antiquewhite aquamarine azure bisque blue brown burlywood cadetblue "
    "chartreuse chocolate coral cornsilk cyan darkgoldenrod darkolivegreen "
    "darkorange darkorchid darkseagreen darkslategray deeppink deepskyblue "
    "dodgerblue firebrick gold goldenrod green honeydew hotpink indianred "
    "ivory khaki lavenderblush lemonchiffon lightblue lightcyan lightgoldenrod "
    "lightpink lightsalmon lightskyblue lightsteelblue lightyellow magenta "
    "maroon mediumorchid mediumpurple mistyrose navajowhite olivedrab orange "
    "orangered orchid palegreen paleturquoise palevioletred peachpuff pink "
    "plum purple red rosybrown royalblue salmon seagreen seashell sienna "
    "skyblue slateblue slategray snow springgreen steelblue tan thistle "
    "tomato turquoise violetred wheat yellow"
).split()

_PLAIN = (
    "aliceblue aqua beige black blanchedalmond blueviolet cornflowerblue "
    "crimson darkblue darkcyan darkgray darkgreen darkgrey darkkhaki "
    "darkmagenta darkred darksalmon darkslateblue darkslategrey "
    "darkturquoise darkviolet dimgray dimgrey floralwhite forestgreen "
    "fuchsia gainsboro ghostwhite gray greenyellow grey indigo invis "
    "lavender lawngreen lightcoral lightgoldenrodyellow lightgray lightgreen "
    "lightgrey lightseagreen lightslateblue lightslategray lightslategrey "
    "lime limegreen linen mediumaquamarine mediumblue mediumseagreen "
    "mediumslateblue mediumspringgreen mediumturquoise mediumvioletred "
    "midnightblue mintcream moccasin navy navyblue none oldlace olive "
    "palegoldenrod papayawhip peru powderblue rebeccapurple saddlebrown "
    "sandybrown silver slategrey teal transparent violet webgray webgreen "
    "webgrey webmaroon webpurple white whitesmoke x11gray x11green x11grey "
    "x11maroon x11purple yellowgreen"
).split()


def _build_x11_names() -> frozenset[str]:
    names: set[str] = set(_PLAIN)
    for base in _NUMBERED:
        names.add(base)
        names.update(f"{base}{i}" for i in range(1, 5))
    for grey in ("gray", "grey"):
        names.update(f"{grey}{i}" for i in range(0, 101))
    return frozenset(names)


X11_COLORS = _build_x11_names()

_HEX = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_HSV = re.compile(r"\s*([0-9]*\.?[0-9]+)\s*[,\s]\s*([0-9]*\.?[0-9]+)\s*[,\s]\s*([0-9]*\.?[0-9]+)\s*")
_SCHEME = re.compile(r"/([A-Za-z0-9]*)/([A-Za-z0-9]+)")
_BREWER_SCHEME = re.compile(r"[a-z]+[0-9]+")


def is_named_color(name: str) -> bool:
    return name.lower() in X11_COLORS


def normalize_color(spec: str) -> str | None:
    """Return the canonical spelling of a color spec, or None if it is invalid.

    Accepted forms:
        named         "red", "Grey40"          -> lower-cased X11 name
        rgb / rgba    "#A0522D", "#a0522d0a"   -> lower-cased hex
        hsv           "0.051,0.718 0.627"      -> "0.051 0.718 0.627"
        scheme        "/x11/red", "/accent3/2"
    """
    text = spec.strip()
    if not text:
        return None

    if text.startswith("#"):
        if _HEX.fullmatch(text):
            return text.lower()
        return None

    if text.startswith("/"):
        match = _SCHEME.fullmatch(text)
        if match is None:
            return None
        scheme, name = match.group(1).lower(), match.group(2)
        if scheme in ("", "x11", "svg"):
            return f"/{scheme}/{name.lower()}" if is_named_color(name) else None
        if _BREWER_SCHEME.fullmatch(scheme) and name.isdigit():
            return f"/{scheme}/{name}"
        return None

    match = _HSV.fullmatch(text)
    if match is not None:
        components = [float(c) for c in match.groups()]
        if all(0.0 <= c <= 1.0 for c in components):
            return " ".join(match.groups())
        return None

    if is_named_color(text):
        return text.lower()
    return None
