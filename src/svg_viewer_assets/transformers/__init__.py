"""Transformers for converting assets to viewer items.

This package contains the Transformer base class and the default
viewer item transformer.
"""

from .base import Transformer
from .viewer_item import ViewerItemTransformer

__all__ = ["Transformer", "ViewerItemTransformer"]
