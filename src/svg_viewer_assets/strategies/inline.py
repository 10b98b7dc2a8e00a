"""Inline strategy: icons are embedded directly where they are used."""

import re
from typing import Any

from ..registry import Strategy, StrategyRegistry

WHITESPACE = re.compile(r"\s")


def inline_id(path: str, id_gen_opts: Any = None) -> str:
    """Use the path itself as the id, with whitespace replaced by dashes."""
    return WHITESPACE.sub("-", path)


def inline_copypasta(asset_id: str) -> str:
    return f'{{{{svg-jar "{asset_id}"}}}}'


# Auto-register at module import
StrategyRegistry.register(Strategy("inline", inline_id, inline_copypasta))
