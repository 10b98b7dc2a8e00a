"""Strategy registry for factory-based pipeline creation.

This module provides a central registry of named strategies (an id
generator paired with a copypasta generator) and discovers the
strategies bundled in the strategies/ package.
"""

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .policies import CopypastaGenerator, IdGenerator

if TYPE_CHECKING:
    from .pipeline import ViewerAssetsPipeline
    from .sources.base import Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strategy:
    """A named pairing of id and copypasta generators.

    Attributes:
        name: Label copied into every viewer item (e.g. 'inline')
        id_gen: Called as id_gen(path, id_gen_opts)
        copypasta_gen: Called as copypasta_gen(asset_id)
        id_gen_opts: Default options for id_gen
    """

    name: str
    id_gen: IdGenerator
    copypasta_gen: CopypastaGenerator
    id_gen_opts: Any = None


class StrategyRegistry:
    """Central registry for strategies.

    Strategy modules register themselves when imported, and the
    registry can automatically discover all bundled strategies.
    """

    _strategies: dict[str, Strategy] = {}

    @classmethod
    def register(cls, strategy: Strategy) -> None:
        """Register a strategy, replacing any previous one with the same name.

        Example:
            >>> StrategyRegistry.register(Strategy(
            ...     'react', lambda p, _: p, lambda i: f'<Icon name="{i}" />'))
        """
        cls._strategies[strategy.name] = strategy

    @classmethod
    def get(cls, name: str) -> Strategy:
        """Look up a strategy by name.

        Raises:
            ValueError: If name is not registered
        """
        if name not in cls._strategies:
            available = ", ".join(cls._strategies.keys()) or "none"
            raise ValueError(f"Unknown strategy: '{name}'. Available strategies: {available}")
        return cls._strategies[name]

    @classmethod
    def list_strategies(cls) -> list[str]:
        """List all registered strategy names.

        Example:
            >>> StrategyRegistry.list_strategies()
            ['inline', 'symbol']
        """
        return list(cls._strategies.keys())

    @classmethod
    def create_pipeline(
        cls, strategy_name: str, source: "Source", **kwargs: Any
    ) -> "ViewerAssetsPipeline":
        """Create a pipeline using a registered strategy.

        Args:
            strategy_name: Name of the registered strategy
            source: Input tree to read from
            **kwargs: 'writer' and 'transformer' go to the pipeline,
                      everything else to BuilderOptions.for_strategy

        Returns:
            ViewerAssetsPipeline configured with the requested strategy

        Example:
            >>> pipeline = StrategyRegistry.create_pipeline(
            ...     'inline',
            ...     FilesystemSource(Path('/icons')),
            ...     output_file='viewer.json',
            ...     writer=FileWriter(Path('dist')),
            ... )
        """
        # Import here to avoid circular dependency
        from .config import BuilderOptions
        from .pipeline import ViewerAssetsPipeline

        pipeline_kwargs = {
            key: kwargs.pop(key) for key in ("writer", "transformer") if key in kwargs
        }
        options = BuilderOptions.for_strategy(strategy_name, **kwargs)

        return ViewerAssetsPipeline(source, options, **pipeline_kwargs)

    @classmethod
    def discover_strategies(cls) -> None:
        """Auto-discover and import all bundled strategies.

        Every public module in the strategies/ directory is imported and
        registers itself on import.
        """
        strategies_dir = Path(__file__).parent / "strategies"

        if not strategies_dir.exists():
            return

        for module_path in sorted(strategies_dir.glob("*.py")):
            if module_path.stem.startswith("_"):
                continue

            try:
                importlib.import_module(
                    f".strategies.{module_path.stem}", package="svg_viewer_assets"
                )
            except ImportError as e:
                logger.debug("Skipping strategy module %s: %s", module_path.stem, e)
