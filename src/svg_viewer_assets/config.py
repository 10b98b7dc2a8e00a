"""Builder configuration.

BuilderOptions carries everything a pipeline run needs besides the input
tree and the output writer.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any

from .policies import (
    CopypastaGenerator,
    FunctionCopypastaPolicy,
    FunctionIdPolicy,
    IdGenerator,
)
from .registry import StrategyRegistry
from .reporting import Reporter

_UNSET = object()


@dataclass
class BuilderOptions:
    """Options for one viewer manifest build.

    Attributes:
        id_gen: Called as id_gen(path, id_gen_opts) to derive asset ids
        id_gen_opts: Options bound into id_gen
        copypasta_gen: Called as copypasta_gen(asset_id)
        strip_path: Prefix removed from relative paths before id_gen
        strategy: Label copied into every viewer item
        output_file: Manifest file name, relative to the output directory
        reporter: Enables the asset validation pass when set
        annotation: Build step label, only used in log messages
    """

    id_gen: IdGenerator
    id_gen_opts: Any
    copypasta_gen: CopypastaGenerator
    strip_path: str
    strategy: str
    output_file: str
    reporter: Reporter | None = None
    annotation: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check required options.

        Raises:
            ValueError: If an option is missing or unusable
        """
        if not callable(self.id_gen):
            raise ValueError("id_gen must be callable")

        if not callable(self.copypasta_gen):
            raise ValueError("copypasta_gen must be callable")

        if not isinstance(self.strip_path, str):
            raise ValueError(f"strip_path must be a string, got {type(self.strip_path).__name__}")

        if not self.strategy:
            raise ValueError("strategy is required")

        if not self.output_file:
            raise ValueError("output_file is required")

        output = PurePosixPath(self.output_file.replace("\\", "/"))
        if output.is_absolute() or ".." in output.parts:
            raise ValueError(f"output_file must stay inside the output directory: {self.output_file}")

    def id_policy(self) -> FunctionIdPolicy:
        return FunctionIdPolicy(self.id_gen, self.id_gen_opts, self.strip_path)

    def copypasta_policy(self) -> FunctionCopypastaPolicy:
        return FunctionCopypastaPolicy(self.copypasta_gen)

    @classmethod
    def for_strategy(
        cls,
        name: str,
        output_file: str,
        strip_path: str = "",
        id_gen_opts: Any = _UNSET,
        reporter: Reporter | None = None,
        annotation: str | None = None,
    ) -> "BuilderOptions":
        """Build options from a registered strategy.

        Args:
            name: Registered strategy name ('inline', 'symbol', ...)
            output_file: Manifest file name
            strip_path: Prefix removed before id generation
            id_gen_opts: Overrides the strategy's default id_gen options
            reporter: Enables validation when set
            annotation: Build step label

        Raises:
            ValueError: If the strategy is unknown or an option is invalid
        """
        strategy = StrategyRegistry.get(name)

        return cls(
            id_gen=strategy.id_gen,
            id_gen_opts=strategy.id_gen_opts if id_gen_opts is _UNSET else id_gen_opts,
            copypasta_gen=strategy.copypasta_gen,
            strip_path=strip_path,
            strategy=strategy.name,
            output_file=output_file,
            reporter=reporter,
            annotation=annotation,
        )
