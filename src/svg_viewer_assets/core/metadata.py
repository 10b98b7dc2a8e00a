"""Size and label derivation for viewer items.

This module turns root SVG attributes into numeric dimensions and formats
the human-readable size strings shown by the viewer.
"""

import math
import re
from collections.abc import Mapping

from .types import Number, Size

# Leading numeric prefix, as accepted by JavaScript's parseFloat
NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: str | None) -> Number | None:
    """Parse the leading number of an attribute value.

    Example:
        "20" -> 20, "20.5px" -> 20.5, "auto" -> None

    Args:
        value: Raw attribute value (may be None)

    Returns:
        The parsed number (int when integral), or None if unparseable
        or not finite ("1e999" overflows to inf)
    """
    if value is None:
        return None

    match = NUMBER_PREFIX.match(value)
    if not match:
        return None

    number = float(match.group(1))
    if not math.isfinite(number):
        return None

    return int(number) if number.is_integer() else number


def svg_size_for(attrs: Mapping[str, str]) -> Size:
    """Derive width and height from root SVG attributes.

    Explicit width/height attributes win over the viewBox dimensions.

    Args:
        attrs: Attributes of the root <svg> tag

    Returns:
        Size with width/height set to None when nothing is parseable
    """
    tokens = (attrs.get("viewBox") or "").split()
    vb_width = tokens[2] if len(tokens) > 2 else None
    vb_height = tokens[3] if len(tokens) > 3 else None

    width = parse_number(attrs.get("width"))
    if width is None:
        width = parse_number(vb_width)

    height = parse_number(attrs.get("height"))
    if height is None:
        height = parse_number(vb_height)

    return Size(width=width, height=height)


def format_number(value: Number | None) -> str:
    """Format a dimension for labels, printing None as 'null'."""
    return "null" if value is None else str(value)


def base_size_label(size: Size) -> str:
    return "unknown" if size.height is None else f"{format_number(size.height)}px"


def full_base_size_label(size: Size) -> str:
    return f"{format_number(size.width)}x{format_number(size.height)}px"


def string_size_in_kb(text: str) -> str:
    """Format the UTF-8 byte size of a text blob in kilobytes.

    Example:
        1186 bytes -> "1.16 KB"
    """
    size_bytes = len(text.encode("utf-8"))
    return f"{size_bytes / 1024:.2f} KB"
