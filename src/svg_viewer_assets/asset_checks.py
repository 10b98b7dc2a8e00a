"""Default validation pass over normalized assets.

The validator only reports; it never changes the asset list. Anything it
raises is left to propagate to the caller.
"""

from collections import Counter
from typing import Callable

from .core.types import Asset
from .reporting import Reporter

AssetValidator = Callable[[list[Asset], str, Reporter], None]


def find_duplicate_ids(assets: list[Asset]) -> list[str]:
    """Return ids used by more than one asset, in first-seen order."""
    counts = Counter(asset.id for asset in assets)
    return [asset_id for asset_id, count in counts.items() if count > 1]


def find_missing_viewbox(assets: list[Asset]) -> list[Asset]:
    return [asset for asset in assets if not asset.svg_data.attrs.get("viewBox")]


def validate_assets(assets: list[Asset], strategy: str, reporter: Reporter) -> None:
    """Report problems the viewer would trip over.

    Args:
        assets: Normalized assets, in discovery order
        strategy: Strategy label, used in messages
        reporter: Where warnings go
    """
    for asset_id in find_duplicate_ids(assets):
        paths = ", ".join(a.relative_path for a in assets if a.id == asset_id)
        reporter.warn(
            f"[{strategy}] Duplicate asset id '{asset_id}' generated for: {paths}. "
            "Only one of them will be usable."
        )

    for asset in find_missing_viewbox(assets):
        reporter.warn(
            f"[{strategy}] Missing viewBox attribute in {asset.relative_path}; "
            "the icon may not scale correctly."
        )
