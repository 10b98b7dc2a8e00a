"""Base transformer class for converting assets to viewer items.

This module defines the base interface for transformers that convert
joined assets into entries of the viewer manifest.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import Asset, ViewerItem
    from ..policies import CopypastaPolicy


class Transformer(ABC):
    """Abstract base class for asset transformers.

    Transformers turn an Asset (with its original markup attached)
    into a ViewerItem that conforms to the JSON schema. They must be pure:
    the same asset always maps to the same item.
    """

    @abstractmethod
    def transform(
        self,
        asset: "Asset",
        strategy: str,
        copypasta: "CopypastaPolicy",
    ) -> "ViewerItem":
        """Transform an asset into a viewer item.

        Args:
            asset: The joined asset
            strategy: Strategy label copied into the item
            copypasta: Policy producing the usage snippet

        Returns:
            ViewerItem dictionary conforming to the JSON schema
        """
        pass
