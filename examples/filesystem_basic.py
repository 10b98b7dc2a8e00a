"""Basic filesystem build example.

This example demonstrates how to:
- Read an optimized SVG tree from disk
- Report validation warnings
- Display summary statistics
- Write the viewer manifest
"""

import sys
from pathlib import Path

from svg_viewer_assets import (
    CollectingReporter,
    FilesystemSource,
    FileWriter,
    StrategyRegistry,
)


def main():
    # Optimized icons, with originals in icons/__original__ (change as needed)
    icon_dir = Path("build") / "icons"

    if not icon_dir.exists():
        print(f"Directory not found: {icon_dir}", file=sys.stderr)
        print("Please update the icon_dir variable in this script", file=sys.stderr)
        return

    reporter = CollectingReporter()
    pipeline = StrategyRegistry.create_pipeline(
        "symbol",
        FilesystemSource(icon_dir),
        output_file="viewer-assets.json",
        id_gen_opts={"prefix": "icon-"},
        reporter=reporter,
        writer=FileWriter(Path("dist")),
    )

    items = pipeline.build()

    # Display summary
    print("\n✓ Manifest generated successfully", file=sys.stderr)
    print(f"  Icons: {len(items)}", file=sys.stderr)
    print(f"  Without original: {sum(1 for i in items if i['originalSvg'] is None)}", file=sys.stderr)
    print(f"  Unknown size: {sum(1 for i in items if i['baseSize'] == 'unknown')}", file=sys.stderr)

    for warning in reporter.warnings:
        print(f"  ! {warning}", file=sys.stderr)


if __name__ == "__main__":
    main()
