"""Type definitions for SVG viewer manifests.

This module defines the in-memory records that flow through the pipeline
and the TypedDict that mirrors the JSON schema in
schemas/viewer-manifest.schema.json.
"""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, TypedDict, Union

Number = Union[int, float]


class RawEntry(NamedTuple):
    """An optimized SVG file as read from the input tree."""

    relative_path: str  # POSIX path relative to the input root
    content: str  # Full text of the optimized file


@dataclass(frozen=True)
class SvgData:
    """Root attributes and inner markup of a parsed SVG document."""

    content: str
    attrs: dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"content": self.content, "attrs": dict(self.attrs)}


@dataclass
class Asset:
    """One optimized SVG file plus its derived identifier.

    `original_svg` stays None until the join stage attaches the
    pre-optimization markup.
    """

    id: str
    svg_data: SvgData
    optimized_svg: str
    relative_path: str
    original_svg: str | None = None


class Size(NamedTuple):
    width: Number | None
    height: Number | None


class ViewerItem(TypedDict):
    """Single entry of the viewer manifest.

    Key order matters: downstream tooling expects the documented order.
    """

    svg: dict[str, Any]  # {"content": ..., "attrs": {...}}
    originalSvg: str | None  # Pre-optimization markup
    width: Number | None
    height: Number | None
    fileName: str  # e.g. "alarm.svg"
    fileDir: str  # e.g. "/" or "/icons"
    fileSize: str | None  # Original size, e.g. "1.16 KB"
    optimizedFileSize: str  # e.g. "0.62 KB"
    baseSize: str  # e.g. "20px" or "unknown"
    fullBaseSize: str  # e.g. "20x20px"
    copypasta: str  # Usage snippet
    strategy: str  # Strategy label, copied verbatim
