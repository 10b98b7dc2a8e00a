"""Core utilities for viewer manifest generation.

This package contains the record types, SVG parsing, size derivation
and schema validation used by every pipeline stage.
"""

from .errors import MalformedSvgError
from .metadata import parse_number, string_size_in_kb, svg_size_for
from .svg import parse_svg
from .types import Asset, RawEntry, Size, SvgData, ViewerItem
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "Asset",
    "MalformedSvgError",
    "RawEntry",
    "Size",
    "SvgData",
    "ViewerItem",
    "parse_number",
    "parse_svg",
    "string_size_in_kb",
    "svg_size_for",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
