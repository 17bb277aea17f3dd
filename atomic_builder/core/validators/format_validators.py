"""
Built-in formats for custom-pattern values.

Catalog files reference formats by name; FORMAT_REGISTRY maps those names to
predicate instances.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseFormat

_COLOR_KEYWORDS = {"transparent", "currentcolor", "inherit", "initial", "unset"}
NAMED_COLORS = frozenset("""
    aliceblue antiquewhite aqua aquamarine azure beige bisque black
    blanchedalmond blue blueviolet brown burlywood cadetblue chartreuse
    chocolate coral cornflowerblue cornsilk crimson cyan darkblue darkcyan
    darkgoldenrod darkgray darkgreen darkgrey darkkhaki darkmagenta
    darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
    darkslateblue darkslategray darkslategrey darkturquoise darkviolet
    deeppink deepskyblue dimgray dimgrey dodgerblue firebrick floralwhite
    forestgreen fuchsia gainsboro ghostwhite gold goldenrod gray green
    greenyellow grey honeydew hotpink indianred indigo ivory khaki lavender
    lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink
    lightsalmon lightseagreen lightskyblue lightslategray lightslategrey
    lightsteelblue lightyellow lime limegreen linen magenta maroon
    mediumaquamarine mediumblue mediumorchid mediumpurple mediumseagreen
    mediumslateblue mediumspringgreen mediumturquoise mediumvioletred
    midnightblue mintcream mistyrose moccasin navajowhite navy oldlace olive
    olivedrab orange orangered orchid palegoldenrod palegreen
    paleturquoise palevioletred papayawhip peachpuff peru pink plum
    powderblue purple rebeccapurple red rosybrown royalblue saddlebrown
    salmon sandybrown seagreen seashell sienna silver skyblue slateblue
    slategray slategrey snow springgreen steelblue tan teal thistle tomato
    turquoise violet wheat white whitesmoke yellow yellowgreen
""".split())
_BORDER_STYLES = (
    "none|hidden|dotted|dashed|solid|double|groove|ridge|inset|outset"
)

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
FUNC_COLOR = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([^()]*\)$")
LENGTH = re.compile(
    r"^-?(?:\d+|\d*\.\d+)(?:px|em|rem|%|vh|vw|vmin|vmax|ex|ch|cm|mm|in|pt|pc)?$"
)
NUMBER = re.compile(r"^-?(?:\d+|\d*\.\d+)$")


class ColorFormat(BaseFormat):
    """Hex, rgb()/rgba()/hsl()/hsla(), a named color or a color keyword."""

    def matches(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        value = value.strip()
        return bool(
            HEX_COLOR.match(value)
            or FUNC_COLOR.match(value)
            or value.lower() in _COLOR_KEYWORDS
            or value.lower() in NAMED_COLORS
        )

    @property
    def format_name(self) -> str:
        return "color"


class LengthFormat(BaseFormat):
    """A CSS length such as `10px`, `1.5em`, `50%`, `0` or `auto`."""

    def matches(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        value = value.strip()
        return value == "auto" or bool(LENGTH.match(value))

    @property
    def format_name(self) -> str:
        return "length"


class NumberFormat(BaseFormat):
    """A unitless number."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and bool(NUMBER.match(value.strip()))

    @property
    def format_name(self) -> str:
        return "number"


class BorderFormat(BaseFormat):
    """
    A border shorthand: `<length> <style> <color>`, e.g. `1px solid #000`.

    Width and color are each optional, the style keyword is required.
    """

    def __init__(self):
        self._length = LengthFormat()
        self._color = ColorFormat()
        self._style = re.compile(rf"^(?:{_BORDER_STYLES})$")

    def matches(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        parts = value.split()
        if not 1 <= len(parts) <= 3:
            return False

        styles = [i for i, part in enumerate(parts) if self._style.match(part)]
        if len(styles) != 1:
            return False

        for i, part in enumerate(parts):
            if i == styles[0]:
                continue
            if i < styles[0] and not self._length.matches(part):
                return False
            if i > styles[0] and not self._color.matches(part):
                return False
        return True

    @property
    def format_name(self) -> str:
        return "border"


class AnyFormat(BaseFormat):
    """Accepts any non-empty string."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    @property
    def format_name(self) -> str:
        return "any"


class RegexFormat(BaseFormat):
    """
    Accepts values matching a regular expression.

    Args:
        pattern: Regular expression pattern (string or compiled Pattern)
        flags: Optional regex flags, ignored for compiled patterns
    """

    def __init__(self, pattern: str | Pattern, flags: int = 0):
        if isinstance(pattern, Pattern):
            self.pattern = pattern
        elif isinstance(pattern, str):
            try:
                self.pattern = re.compile(pattern, flags)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern: {e}")
        else:
            raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and bool(self.pattern.fullmatch(value))

    @property
    def format_name(self) -> str:
        return "regex"

    def __repr__(self) -> str:
        return f"RegexFormat({self.pattern.pattern!r})"


FORMAT_REGISTRY: dict[str, BaseFormat] = {
    "color": ColorFormat(),
    "length": LengthFormat(),
    "number": NumberFormat(),
    "border": BorderFormat(),
    "any": AnyFormat(),
}


def resolve_format(entry: Any) -> Any:
    """
    Resolve a catalog format entry to a predicate.

    Args:
        entry: A callable (returned as is), a registered format name, or a
               mapping `{"regex": "<pattern>"}`

    Returns:
        A callable predicate

    Raises:
        ValueError: If the format name is unknown or the entry is malformed
    """
    if callable(entry):
        return entry
    if isinstance(entry, str):
        predicate = FORMAT_REGISTRY.get(entry)
        if predicate is None:
            raise ValueError(f"Unknown format: {entry}")
        return predicate
    if isinstance(entry, dict) and set(entry) == {"regex"}:
        return RegexFormat(entry["regex"])
    raise ValueError(f"Format entry must be a name or {{'regex': pattern}}, got {entry!r}")
