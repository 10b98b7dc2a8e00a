"""In-memory source adapter.

Useful for tests and for callers that already hold file contents,
e.g. the output of an optimizer run kept in memory.
"""

from collections.abc import Mapping
from pathlib import PurePath, PurePosixPath

from .base import Source


class MemorySource(Source):
    """Source backed by a mapping of relative path to content.

    Directories are implied by the file paths and listed before their
    contents, mirroring a depth-first directory walk.

    Example:
        >>> source = MemorySource({
        ...     'alarm.svg': '<svg viewBox="0 0 20 20"><path/></svg>',
        ...     '__original__/alarm.svg': '<svg ...>...</svg>',
        ... })
    """

    def __init__(self, files: Mapping[str, str | None], root: str = "/input"):
        self.root = PurePosixPath(root)
        self._files = {self.root / relative: content for relative, content in files.items()}

    def list_paths(self) -> list[PurePath]:
        paths: list[PurePath] = []
        seen: set[PurePath] = set()

        for file_path in sorted(self._files):
            relative = file_path.relative_to(self.root)
            for depth in range(1, len(relative.parts)):
                directory = self.root.joinpath(*relative.parts[:depth])
                if directory not in seen:
                    seen.add(directory)
                    paths.append(directory)
            paths.append(file_path)

        return paths

    def is_file(self, path: PurePath) -> bool:
        return PurePosixPath(path) in self._files

    def read_text(self, path: PurePath) -> str | None:
        return self._files.get(PurePosixPath(path))
