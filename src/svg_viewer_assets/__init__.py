"""SVG Viewer Assets.

This package walks a tree of optimized SVG icons (plus their
pre-optimization originals under __original__) and writes the JSON
manifest consumed by the icon viewer generator.
"""

# Core library interface
from .config import BuilderOptions
from .pipeline import ViewerAssetsPipeline
from .registry import Strategy, StrategyRegistry
from .sources import FilesystemSource, MemorySource, Source

# Policies, validation and output
from .asset_checks import validate_assets
from .policies import CopypastaPolicy, FunctionCopypastaPolicy, FunctionIdPolicy, IdPolicy
from .reporting import CollectingReporter, LoggingReporter, Reporter
from .writers import FileWriter, MemoryWriter, Writer, serialize_items

# Core utilities
from .core import Asset, MalformedSvgError, SvgData, ViewerItem
from .core import validate_manifest, validate_manifest_with_error_details

# CLI interface
from .cli import build_viewer_assets, main

__version__ = "0.1.0"

# Auto-discover and register all bundled strategies
StrategyRegistry.discover_strategies()

__all__ = [
    # Primary library interface
    "ViewerAssetsPipeline",
    "BuilderOptions",
    "StrategyRegistry",
    "Strategy",
    "Source",
    "FilesystemSource",
    "MemorySource",
    # Policies, validation and output
    "IdPolicy",
    "CopypastaPolicy",
    "FunctionIdPolicy",
    "FunctionCopypastaPolicy",
    "Reporter",
    "LoggingReporter",
    "CollectingReporter",
    "validate_assets",
    "Writer",
    "FileWriter",
    "MemoryWriter",
    "serialize_items",
    # Core utilities
    "Asset",
    "SvgData",
    "ViewerItem",
    "MalformedSvgError",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # CLI
    "build_viewer_assets",
    "main",
]
