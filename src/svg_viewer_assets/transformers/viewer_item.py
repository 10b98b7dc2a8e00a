"""Viewer item transformer.

This module converts joined assets into the records written to the
viewer manifest.
"""

import posixpath

from ..core.metadata import (
    base_size_label,
    full_base_size_label,
    string_size_in_kb,
    svg_size_for,
)
from ..core.types import Asset, ViewerItem
from ..policies import CopypastaPolicy
from .base import Transformer


def split_relative_path(relative_path: str) -> tuple[str, str]:
    """Split a relative path into (file_dir, file_name).

    Example:
        "alarm.svg" -> ("/", "alarm.svg")
        "icons/alarm.svg" -> ("/icons", "alarm.svg")
    """
    directory, file_name = posixpath.split(relative_path)
    if directory in ("", "."):
        return "/", file_name
    return "/" + directory, file_name


class ViewerItemTransformer(Transformer):
    """Builds viewer items from assets.

    Dimensions come from the optimized markup's root attributes; sizes are
    reported for both the original and the optimized markup.
    """

    def transform(
        self,
        asset: Asset,
        strategy: str,
        copypasta: CopypastaPolicy,
    ) -> ViewerItem:
        size = svg_size_for(asset.svg_data.attrs)
        file_dir, file_name = split_relative_path(asset.relative_path)

        original_size = (
            string_size_in_kb(asset.original_svg) if asset.original_svg is not None else None
        )

        item: ViewerItem = {
            "svg": asset.svg_data.as_dict(),
            "originalSvg": asset.original_svg,
            "width": size.width,
            "height": size.height,
            "fileName": file_name,
            "fileDir": file_dir,
            "fileSize": original_size,
            "optimizedFileSize": string_size_in_kb(asset.optimized_svg),
            "baseSize": base_size_label(size),
            "fullBaseSize": full_base_size_label(size),
            "copypasta": copypasta.derive_snippet(asset.id),
            "strategy": strategy,
        }

        return item
