"""Viewer assets pipeline.

This module turns an optimized SVG tree into the viewer manifest. Each
stage is an order-preserving transform over an in-memory list:

    select files -> load entries -> build assets -> validate
    -> attach originals -> transform to viewer items -> write

Only two per-file conditions are tolerated: unreadable/empty optimized
files are skipped and missing originals leave `original_svg` unset.
Everything else (malformed SVG, validator errors, write errors) aborts
the run before anything is written.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import PurePath

from .asset_checks import AssetValidator, validate_assets
from .config import BuilderOptions
from .core.svg import parse_svg
from .core.types import Asset, RawEntry, ViewerItem
from .policies import IdPolicy
from .sources.base import Source
from .transformers.base import Transformer
from .transformers.viewer_item import ViewerItemTransformer
from .writers import Writer, serialize_items

logger = logging.getLogger(__name__)

# Directory (below the input root) holding pre-optimization markup
ORIGINALS_DIR = "__original__"


def _is_within(path: PurePath, directory: PurePath) -> bool:
    return path == directory or directory in path.parents


def select_files(
    paths: Iterable[PurePath], root: PurePath, is_file: Callable[[PurePath], bool]
) -> list[PurePath]:
    """Keep regular files that are not part of the originals tree."""
    originals = root / ORIGINALS_DIR
    return [path for path in paths if is_file(path) and not _is_within(path, originals)]


def relative_path_for(path: PurePath, root: PurePath) -> str:
    return path.relative_to(root).as_posix()


def load_entries(paths: Iterable[PurePath], source: Source) -> list[RawEntry]:
    """Read optimized files, dropping any without content."""
    entries: list[RawEntry] = []

    for path in paths:
        content = source.read_text(path)
        if not content:
            logger.debug("Skipping %s: empty or unreadable", path)
            continue
        entries.append(RawEntry(relative_path_for(path, source.root), content))

    return entries


def build_asset(entry: RawEntry, id_policy: IdPolicy) -> Asset:
    """Normalize a raw entry into an Asset.

    Raises:
        MalformedSvgError: If the content isn't an SVG document
    """
    return Asset(
        id=id_policy.derive_id(entry.relative_path),
        svg_data=parse_svg(entry.content, entry.relative_path),
        optimized_svg=entry.content,
        relative_path=entry.relative_path,
    )


def attach_originals(assets: Iterable[Asset], source: Source) -> None:
    """Attach pre-optimization markup from the originals tree, when present."""
    originals = source.root / ORIGINALS_DIR

    for asset in assets:
        asset.original_svg = source.read_text(originals / asset.relative_path) or None
        if asset.original_svg is None:
            logger.debug("No original found for %s", asset.relative_path)


class ViewerAssetsPipeline:
    """Main interface for viewer manifest generation.

    The pipeline is independent of where files come from and where the
    manifest goes: both are injected, which keeps it testable without a
    real filesystem.

    Example:
        >>> # Via registry (recommended)
        >>> from svg_viewer_assets import StrategyRegistry
        >>> pipeline = StrategyRegistry.create_pipeline(
        ...     'inline', FilesystemSource(Path('icons')),
        ...     output_file='viewer.json', writer=FileWriter(Path('dist')))
        >>> pipeline.build()
        >>>
        >>> # Direct instantiation (custom generators)
        >>> options = BuilderOptions(id_gen=my_id, id_gen_opts=None,
        ...     copypasta_gen=my_snippet, strip_path='', strategy='inline',
        ...     output_file='viewer.json')
        >>> items = ViewerAssetsPipeline(source, options).generate_items()
    """

    def __init__(
        self,
        source: Source,
        options: BuilderOptions,
        writer: Writer | None = None,
        transformer: Transformer | None = None,
        validator: AssetValidator = validate_assets,
    ):
        """Initialize the pipeline.

        Args:
            source: Input tree holding optimized SVGs and __original__
            options: Builder options (generators, strategy, output file)
            writer: Where build() writes the manifest
            transformer: Maps assets to viewer items
            validator: Called as validator(assets, strategy, reporter)
                       when options.reporter is set
        """
        self.source = source
        self.options = options
        self.writer = writer
        self.transformer = transformer or ViewerItemTransformer()
        self.validator = validator
        self.id_policy = options.id_policy()
        self.copypasta_policy = options.copypasta_policy()

    def collect_assets(self) -> list[Asset]:
        """Run the selection, loading and normalization stages."""
        paths = select_files(self.source.list_paths(), self.source.root, self.source.is_file)
        entries = load_entries(paths, self.source)
        return [build_asset(entry, self.id_policy) for entry in entries]

    def generate_items(self) -> list[ViewerItem]:
        """Generate viewer items for every optimized SVG, in discovery order.

        Returns:
            List of ViewerItem dictionaries conforming to the JSON schema

        Raises:
            MalformedSvgError: If an optimized file isn't valid SVG
        """
        label = f" ({self.options.annotation})" if self.options.annotation else ""
        logger.info("Building viewer assets%s from %s", label, self.source.root)

        assets = self.collect_assets()

        if self.options.reporter is not None:
            self.validator(assets, self.options.strategy, self.options.reporter)

        attach_originals(assets, self.source)

        return [
            self.transformer.transform(asset, self.options.strategy, self.copypasta_policy)
            for asset in assets
        ]

    def write(self, items: list[ViewerItem]) -> None:
        """Serialize items and hand them to the writer in one piece.

        Raises:
            ValueError: If no writer is configured
        """
        if self.writer is None:
            raise ValueError("No writer configured for this pipeline")

        self.writer.write(self.options.output_file, serialize_items(items))
        logger.info("Wrote %d items to %s", len(items), self.options.output_file)

    def build(self) -> list[ViewerItem]:
        """Generate the manifest and write it.

        Returns:
            The items that were written
        """
        if self.writer is None:
            raise ValueError("No writer configured for this pipeline")

        items = self.generate_items()
        self.write(items)
        return items
