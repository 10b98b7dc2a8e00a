"""Base abstractions for input trees.

This module defines the interface that all sources must implement to
feed the viewer assets pipeline. A source owns file listing and reading;
the pipeline never touches the filesystem directly.
"""

from abc import ABC, abstractmethod
from pathlib import PurePath


class Source(ABC):
    """Abstract base class for input trees.

    Implementations expose a root path, a flat listing of everything
    below it, and text reads. The listing is materialized up front.

    Attributes:
        root: Root of the input tree; listed paths live below it
    """

    root: PurePath

    @abstractmethod
    def list_paths(self) -> list[PurePath]:
        """List every path below the root, files and directories intermixed.

        Returns:
            Paths in a stable order; the pipeline preserves it
        """
        pass

    @abstractmethod
    def is_file(self, path: PurePath) -> bool:
        """Return True if path points at a regular file."""
        pass

    @abstractmethod
    def read_text(self, path: PurePath) -> str | None:
        """Read a file as UTF-8 text.

        Args:
            path: Path to read

        Returns:
            File content, or None if the file is missing or unreadable
        """
        pass
