"""Symbol strategy: icons are referenced from a shared sprite by #id."""

import re
from typing import Any

from ..registry import Strategy, StrategyRegistry

WHITESPACE = re.compile(r"\s")


def symbol_id(path: str, id_gen_opts: Any = None) -> str:
    """Prefix the path with id_gen_opts['prefix'] and dash-separate whitespace.

    Example:
        symbol_id("my icons/alarm", {"prefix": "i-"}) -> "i-my-icons/alarm"
    """
    prefix = (id_gen_opts or {}).get("prefix", "")
    return WHITESPACE.sub("-", f"{prefix}{path}")


def symbol_copypasta(asset_id: str) -> str:
    return f'{{{{svg-jar "#{asset_id}"}}}}'


# Auto-register at module import
StrategyRegistry.register(Strategy("symbol", symbol_id, symbol_copypasta, {"prefix": ""}))
