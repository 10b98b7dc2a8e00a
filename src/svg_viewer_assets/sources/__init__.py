"""Source adapters for the viewer assets pipeline.

This package contains the Source interface and the filesystem and
in-memory implementations.
"""

from .base import Source
from .filesystem import FilesystemSource
from .memory import MemorySource

__all__ = ["Source", "FilesystemSource", "MemorySource"]
