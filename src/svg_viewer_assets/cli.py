"""Command-line interface for the viewer assets builder.

This module provides the CLI entry point for generating the viewer
manifest from an optimized SVG directory.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import BuilderOptions
from .core.types import ViewerItem
from .core.validator import validate_manifest_with_error_details
from .pipeline import ViewerAssetsPipeline
from .registry import StrategyRegistry
from .reporting import LoggingReporter
from .sources.filesystem import FilesystemSource
from .writers import FileWriter

logger = logging.getLogger(__name__)

COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        color = COLORS.get(record.levelname, "")
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


_handler: logging.Handler | None = None


def setup_logging(verbose: bool = False) -> None:
    global _handler

    # Repeated calls (e.g. main() invoked twice in one process) replace the handler
    if _handler is not None:
        logging.root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(_handler)
    logging.root.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_viewer_assets(
    input_path: Path,
    output_dir: Path,
    output_file: str,
    strategy: str = "inline",
    strip_path: str = "",
    prefix: str | None = None,
    validate: bool = True,
    annotation: str | None = None,
) -> list[ViewerItem]:
    """Build the viewer manifest for an optimized SVG directory.

    Args:
        input_path: Directory with optimized SVGs and __original__
        output_dir: Directory the manifest is written into
        output_file: Manifest file name inside output_dir
        strategy: Registered strategy name
        strip_path: Prefix removed from relative paths before id generation
        prefix: Id prefix passed to the strategy's id generator
        validate: Run the asset validation pass
        annotation: Build step label for log messages

    Returns:
        The items written to the manifest

    Raises:
        ValueError: If input validation fails
        MalformedSvgError: If an optimized file isn't valid SVG
    """
    extra = {} if prefix is None else {"id_gen_opts": {"prefix": prefix}}
    options = BuilderOptions.for_strategy(
        strategy,
        output_file=output_file,
        strip_path=strip_path,
        reporter=LoggingReporter() if validate else None,
        annotation=annotation,
        **extra,
    )

    pipeline = ViewerAssetsPipeline(
        FilesystemSource(input_path),
        options,
        writer=FileWriter(output_dir),
    )
    items = pipeline.generate_items()

    # Validate against JSON schema before anything is written
    logger.info("Validating manifest against schema...")
    is_valid, error_msg = validate_manifest_with_error_details(items)
    if not is_valid:
        raise ValueError(f"Manifest validation failed:\n{error_msg}")

    pipeline.write(items)
    return items


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the viewer assets builder."""
    parser = argparse.ArgumentParser(
        description="Generate the JSON manifest consumed by the SVG viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Inline strategy, manifest written to dist/viewer-assets.json
  svg-viewer-assets --input build/icons --output-dir dist

  # Symbol strategy with an id prefix
  svg-viewer-assets --input build/icons --output-dir dist \\
      --strategy symbol --prefix icon- --output-file symbols.json
        """,
    )

    parser.add_argument(
        "--input", required=True, help="Directory with optimized SVGs and an __original__ subtree"
    )

    parser.add_argument("--output-dir", required=True, help="Directory to write the manifest into")

    parser.add_argument(
        "--output-file",
        default="viewer-assets.json",
        help="Manifest file name inside the output directory (default: viewer-assets.json)",
    )

    parser.add_argument(
        "--strategy",
        default="inline",
        choices=StrategyRegistry.list_strategies(),
        help="Strategy used to derive ids and usage snippets (default: inline)",
    )

    parser.add_argument(
        "--strip-path", default="", help="Prefix removed from relative paths before id generation"
    )

    parser.add_argument("--prefix", help="Id prefix passed to the strategy's id generator")

    parser.add_argument(
        "--no-validate", action="store_true", help="Skip the asset validation pass"
    )

    parser.add_argument("--annotation", help="Label for this build step in log output")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Validate path exists
    path = Path(args.input)
    if not path.exists():
        print(f"Error: Path does not exist: {path}", file=sys.stderr)
        sys.exit(1)

    if not path.is_dir():
        print(f"Error: Path is not a directory: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        build_viewer_assets(
            input_path=path,
            output_dir=Path(args.output_dir),
            output_file=args.output_file,
            strategy=args.strategy,
            strip_path=args.strip_path,
            prefix=args.prefix,
            validate=not args.no_validate,
            annotation=args.annotation,
        )
    except Exception as e:
        print(f"Error: Failed to build viewer assets: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Done")


if __name__ == "__main__":
    main()
