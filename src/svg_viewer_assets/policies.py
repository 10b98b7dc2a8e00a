"""Pluggable identifier and copypasta policies.

The pipeline only depends on the two abstractions defined here. Callers
either implement them directly or hand plain functions to the Function*
adapters, which is what strategies and the CLI do.
"""

import re
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Callable

IdGenerator = Callable[[str, Any], str]
CopypastaGenerator = Callable[[str], str]

EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")


def strip_extension(path: str) -> str:
    """Remove the file extension: "icons/alarm.svg" -> "icons/alarm"."""
    return EXTENSION_PATTERN.sub("", path)


def strip_prefix(path: str, strip_path: str) -> str:
    """Remove a configured directory prefix from a relative path.

    The prefix only matches whole path segments, so "icons" strips
    "icons/alarm" but leaves "iconset/alarm" alone.

    Example:
        strip_prefix("icons/alarm", "icons/") -> "alarm"
    """
    prefix = strip_path.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        return path[len(prefix):].lstrip("/")
    return path


class IdPolicy(ABC):
    """Derives a stable asset id from a relative path."""

    @abstractmethod
    def derive_id(self, relative_path: str) -> str:
        pass


class CopypastaPolicy(ABC):
    """Derives the usage snippet shown next to an icon."""

    @abstractmethod
    def derive_snippet(self, asset_id: str) -> str:
        pass


class FunctionIdPolicy(IdPolicy):
    """Adapts an ``id_gen(path, id_gen_opts)`` function to IdPolicy.

    The extension and the ``strip_path`` prefix are removed before the
    generator is called, and ``id_gen_opts`` is bound up front so the
    generator only ever sees the normalized path.

    Example:
        >>> policy = FunctionIdPolicy(lambda p, opts: opts['prefix'] + p,
        ...                           {'prefix': 'icon-'}, strip_path='icons/')
        >>> policy.derive_id('icons/alarm.svg')
        'icon-alarm'
    """

    def __init__(self, id_gen: IdGenerator, id_gen_opts: Any = None, strip_path: str = ""):
        self.strip_path = strip_path
        self._id_gen: Callable[[str], str] = partial(_call_id_gen, id_gen, id_gen_opts)

    def normalize_path(self, relative_path: str) -> str:
        return strip_prefix(strip_extension(relative_path), self.strip_path)

    def derive_id(self, relative_path: str) -> str:
        return self._id_gen(self.normalize_path(relative_path))


class FunctionCopypastaPolicy(CopypastaPolicy):
    """Adapts a ``copypasta_gen(asset_id)`` function to CopypastaPolicy."""

    def __init__(self, copypasta_gen: CopypastaGenerator):
        self._copypasta_gen = copypasta_gen

    def derive_snippet(self, asset_id: str) -> str:
        return self._copypasta_gen(asset_id)


def _call_id_gen(id_gen: IdGenerator, id_gen_opts: Any, path: str) -> str:
    return id_gen(path, id_gen_opts)
