"""Filesystem source adapter.

This module provides a Source implementation for reading an optimized
SVG tree (and its __original__ sibling) from a local directory.
"""

import logging
import os
from pathlib import Path, PurePath

from .base import Source

logger = logging.getLogger(__name__)


class FilesystemSource(Source):
    """Source adapter for local directories.

    Paths are listed depth-first, sorted by name within each directory,
    so repeated runs over the same tree see the same order.

    Example:
        >>> source = FilesystemSource(Path('/path/to/icons'))
        >>> paths = source.list_paths()
        >>> svg = source.read_text(paths[0])
    """

    def __init__(self, path: Path):
        """Initialize filesystem source.

        Args:
            path: Root directory of the optimized SVG tree

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.root = path.resolve()

        if not self.root.exists():
            raise ValueError(f"Path does not exist: {self.root}")

        if not self.root.is_dir():
            raise ValueError(f"Path is not a directory: {self.root}")

    def list_paths(self) -> list[PurePath]:
        paths: list[PurePath] = []
        self._walk(self.root, paths)
        return paths

    def _walk(self, directory: Path, paths: list[PurePath]) -> None:
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)

        for entry in ordered:
            entry_path = Path(entry.path)
            paths.append(entry_path)
            if entry.is_dir(follow_symlinks=False):
                self._walk(entry_path, paths)

    def is_file(self, path: PurePath) -> bool:
        return Path(path).is_file()

    def read_text(self, path: PurePath) -> str | None:
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            return None
