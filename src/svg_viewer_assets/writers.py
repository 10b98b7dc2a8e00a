"""Manifest serialization and output writers.

Serialization is compact JSON with the item keys in their documented
order. Writers receive the complete document at once; there is no
streaming output.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from .core.types import ViewerItem

logger = logging.getLogger(__name__)


def serialize_items(items: list[ViewerItem]) -> str:
    """Serialize viewer items to a compact JSON array."""
    return json.dumps(items, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents an output file name from escaping the output directory.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class Writer(ABC):
    """Capability to persist a finished manifest."""

    @abstractmethod
    def write(self, output_file: str, content: str) -> None:
        """Write the full manifest text.

        Args:
            output_file: Output file name, relative to the writer's target
            content: Complete serialized manifest
        """
        pass


class FileWriter(Writer):
    """Writes manifests under an output directory.

    The file is written to a temporary sibling first and moved into
    place, so readers never observe a partial manifest.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def resolve(self, output_file: str) -> Path:
        target = self.output_dir / output_file
        validate_path_safety(target, self.output_dir)
        return target

    def write(self, output_file: str, content: str) -> None:
        target = self.resolve(output_file)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), target)


class MemoryWriter(Writer):
    """Keeps written manifests in a dict keyed by output file name."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}

    def write(self, output_file: str, content: str) -> None:
        self.files[output_file] = content
