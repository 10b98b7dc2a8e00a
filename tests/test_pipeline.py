"""Tests for the viewer assets pipeline.

This module covers each stage on its own and the end-to-end build
against an in-memory source:
- file selection and loading
- asset normalization and the validation hook
- joining original markup
- the written manifest
"""

import json
from pathlib import PurePosixPath

import pytest

from svg_viewer_assets import (
    BuilderOptions,
    CollectingReporter,
    MalformedSvgError,
    MemorySource,
    MemoryWriter,
    ViewerAssetsPipeline,
)
from svg_viewer_assets.core.types import RawEntry
from svg_viewer_assets.pipeline import (
    attach_originals,
    build_asset,
    load_entries,
    select_files,
)
from svg_viewer_assets.policies import FunctionIdPolicy

from .conftest import ALARM_ORIGINAL, ALARM_SVG, WIDE_SVG

ROOT = PurePosixPath("/input")


def _sized_svg(size_bytes: int) -> str:
    """Build a valid SVG document of exactly size_bytes ASCII bytes."""
    prefix = '<svg viewBox="0 0 20 20"><path d="'
    suffix = '"/></svg>'
    return prefix + "0" * (size_bytes - len(prefix) - len(suffix)) + suffix


class TestSelectFiles:
    """Test the file selector stage."""

    def test_keeps_files_in_listing_order(self) -> None:
        """Test that order follows the listing, not the name."""
        paths = [ROOT / "b.svg", ROOT / "icons", ROOT / "icons/a.svg", ROOT / "a.svg"]
        files = {ROOT / "b.svg", ROOT / "icons/a.svg", ROOT / "a.svg"}

        selected = select_files(paths, ROOT, lambda p: p in files)

        assert selected == [ROOT / "b.svg", ROOT / "icons/a.svg", ROOT / "a.svg"]

    def test_excludes_originals_tree(self) -> None:
        """Test that nothing under __original__ is selected."""
        paths = [
            ROOT / "__original__",
            ROOT / "__original__/alarm.svg",
            ROOT / "__original__/icons/wide.svg",
            ROOT / "alarm.svg",
        ]

        selected = select_files(paths, ROOT, lambda p: p.suffix == ".svg")

        assert selected == [ROOT / "alarm.svg"]

    def test_similar_names_are_not_originals(self) -> None:
        """Test that only the exact __original__ directory is excluded."""
        paths = [ROOT / "__original__backup/alarm.svg", ROOT / "icons/__original__.svg"]

        selected = select_files(paths, ROOT, lambda p: True)

        assert selected == paths


class TestLoadEntries:
    """Test the raw loader stage."""

    def test_relative_paths_and_content(self) -> None:
        """Test that entries carry POSIX relative paths."""
        source = MemorySource({"icons/alarm.svg": ALARM_SVG})

        entries = load_entries([ROOT / "icons/alarm.svg"], source)

        assert entries == [RawEntry("icons/alarm.svg", ALARM_SVG)]

    def test_drops_empty_and_unreadable(self) -> None:
        """Test that missing or empty content is skipped silently."""
        source = MemorySource({"empty.svg": "", "none.svg": None, "ok.svg": ALARM_SVG})
        paths = [ROOT / "empty.svg", ROOT / "none.svg", ROOT / "missing.svg", ROOT / "ok.svg"]

        entries = load_entries(paths, source)

        assert [e.relative_path for e in entries] == ["ok.svg"]


class TestBuildAsset:
    """Test the asset normalizer stage."""

    def test_builds_asset(self) -> None:
        """Test that the asset holds id, parsed data and verbatim markup."""
        policy = FunctionIdPolicy(lambda path, _: path, strip_path="icons/")

        asset = build_asset(RawEntry("icons/alarm.svg", ALARM_SVG), policy)

        assert asset.id == "alarm"
        assert asset.relative_path == "icons/alarm.svg"
        assert asset.optimized_svg == ALARM_SVG
        assert asset.svg_data.attrs["viewBox"] == "0 0 20 20"
        assert asset.original_svg is None

    def test_malformed_svg_raises(self) -> None:
        """Test that malformed markup is not recovered."""
        policy = FunctionIdPolicy(lambda path, _: path)

        with pytest.raises(MalformedSvgError):
            build_asset(RawEntry("bad.svg", "<svg"), policy)


class TestAttachOriginals:
    """Test the original-content joiner stage."""

    def test_attaches_matching_original(self) -> None:
        """Test that the original is found by relative path."""
        source = MemorySource({"alarm.svg": ALARM_SVG, "__original__/alarm.svg": ALARM_ORIGINAL})
        asset = build_asset(RawEntry("alarm.svg", ALARM_SVG), FunctionIdPolicy(lambda p, _: p))

        attach_originals([asset], source)

        assert asset.original_svg == ALARM_ORIGINAL

    def test_missing_original_leaves_none(self) -> None:
        """Test that a missing original is not an error."""
        source = MemorySource({"icons/wide.svg": WIDE_SVG})
        asset = build_asset(RawEntry("icons/wide.svg", WIDE_SVG), FunctionIdPolicy(lambda p, _: p))

        attach_originals([asset], source)

        assert asset.original_svg is None


class TestViewerAssetsPipeline:
    """Test end-to-end manifest generation."""

    def test_one_item_per_optimized_file(self, memory_source, inline_options) -> None:
        """Test that originals never become items and order is kept."""
        items = ViewerAssetsPipeline(memory_source, inline_options).generate_items()

        assert [(i["fileDir"], i["fileName"]) for i in items] == [
            ("/", "alarm.svg"),
            ("/icons", "wide.svg"),
        ]

    def test_item_contents(self, memory_source, inline_options) -> None:
        """Test the fields of a fully joined item."""
        alarm = ViewerAssetsPipeline(memory_source, inline_options).generate_items()[0]

        assert alarm["svg"] == {
            "content": '<path d="M0 0h20v20H0z"/>',
            "attrs": {"width": "20", "height": "20", "viewBox": "0 0 20 20"},
        }
        assert alarm["originalSvg"] == ALARM_ORIGINAL
        assert alarm["width"] == 20
        assert alarm["height"] == 20
        assert alarm["baseSize"] == "20px"
        assert alarm["fullBaseSize"] == "20x20px"
        assert alarm["copypasta"] == '{{svg-jar "alarm"}}'
        assert alarm["strategy"] == "inline"

    def test_viewbox_only_dimensions(self, memory_source, inline_options) -> None:
        """Test dimensions derived from viewBox alone."""
        wide = ViewerAssetsPipeline(memory_source, inline_options).generate_items()[1]

        assert (wide["width"], wide["height"]) == (32, 24)
        assert wide["baseSize"] == "24px"
        assert wide["fullBaseSize"] == "32x24px"

    def test_missing_original_still_produces_item(self, memory_source, inline_options) -> None:
        """Test that optimized-derived fields are filled without an original."""
        wide = ViewerAssetsPipeline(memory_source, inline_options).generate_items()[1]

        assert wide["originalSvg"] is None
        assert wide["fileSize"] is None
        assert wide["optimizedFileSize"].endswith(" KB")
        assert wide["copypasta"] == '{{svg-jar "icons/wide"}}'

    def test_file_sizes(self, inline_options) -> None:
        """Test original and optimized sizes in KB."""
        source = MemorySource({"alarm.svg": _sized_svg(636), "__original__/alarm.svg": "a" * 1186})

        item = ViewerAssetsPipeline(source, inline_options).generate_items()[0]

        assert item["fileSize"] == "1.16 KB"
        assert item["optimizedFileSize"] == "0.62 KB"

    def test_unknown_size(self, inline_options) -> None:
        """Test that no dimensions give an unknown base size."""
        source = MemorySource({"blob.svg": "<svg><path/></svg>"})

        item = ViewerAssetsPipeline(source, inline_options).generate_items()[0]

        assert item["height"] is None
        assert item["baseSize"] == "unknown"
        assert item["fullBaseSize"] == "nullxnullpx"

    def test_strip_path_applies_to_ids(self) -> None:
        """Test that strip_path is removed before id generation."""
        options = BuilderOptions.for_strategy(
            "symbol", output_file="x.json", strip_path="icons/", id_gen_opts={"prefix": "i-"}
        )
        source = MemorySource({"icons/alarm clock.svg": ALARM_SVG})

        item = ViewerAssetsPipeline(source, options).generate_items()[0]

        assert item["copypasta"] == '{{svg-jar "#i-alarm-clock"}}'
        assert item["fileDir"] == "/icons"

    def test_build_writes_compact_json(self, memory_source, inline_options, memory_writer) -> None:
        """Test that build writes one JSON array under output_file."""
        ViewerAssetsPipeline(memory_source, inline_options, writer=memory_writer).build()

        text = memory_writer.files["viewer.json"]
        manifest = json.loads(text)
        assert len(manifest) == 2
        assert list(manifest[0]) == [
            "svg",
            "originalSvg",
            "width",
            "height",
            "fileName",
            "fileDir",
            "fileSize",
            "optimizedFileSize",
            "baseSize",
            "fullBaseSize",
            "copypasta",
            "strategy",
        ]
        assert text.startswith('[{"svg":{"content":')

    def test_overflowing_dimensions_write_strict_json(self, inline_options, memory_writer) -> None:
        """Test that huge attribute values still produce standard JSON."""
        source = MemorySource({"a.svg": '<svg width="1e999" height="1e999"/>'})

        ViewerAssetsPipeline(source, inline_options, writer=memory_writer).build()

        def reject(token):
            raise ValueError(token)

        manifest = json.loads(memory_writer.files["viewer.json"], parse_constant=reject)
        assert manifest[0]["width"] is None
        assert manifest[0]["fullBaseSize"] == "nullxnullpx"

    def test_build_is_reproducible(self, icon_files, inline_options) -> None:
        """Test that identical inputs give byte-identical output."""
        first, second = MemoryWriter(), MemoryWriter()

        ViewerAssetsPipeline(MemorySource(icon_files), inline_options, writer=first).build()
        ViewerAssetsPipeline(MemorySource(icon_files), inline_options, writer=second).build()

        assert first.files == second.files

    def test_empty_tree_writes_empty_array(self, inline_options, memory_writer) -> None:
        """Test that no eligible files still produce a manifest."""
        source = MemorySource({"__original__/alarm.svg": ALARM_ORIGINAL})

        ViewerAssetsPipeline(source, inline_options, writer=memory_writer).build()

        assert memory_writer.files == {"viewer.json": "[]"}

    def test_malformed_svg_aborts_without_output(self, inline_options, memory_writer) -> None:
        """Test that one malformed file fails the whole build."""
        source = MemorySource({"alarm.svg": ALARM_SVG, "broken.svg": "<svg><g></svg>"})
        pipeline = ViewerAssetsPipeline(source, inline_options, writer=memory_writer)

        with pytest.raises(MalformedSvgError, match="broken.svg"):
            pipeline.build()

        assert memory_writer.files == {}

    def test_build_without_writer_raises(self, memory_source, inline_options) -> None:
        """Test that build needs a writer."""
        with pytest.raises(ValueError, match="No writer configured"):
            ViewerAssetsPipeline(memory_source, inline_options).build()


class TestValidationHook:
    """Test how the pipeline invokes the asset validator."""

    def test_skipped_without_reporter(self, memory_source, inline_options) -> None:
        """Test that validation only runs when a reporter is configured."""
        calls = []

        ViewerAssetsPipeline(
            memory_source, inline_options, validator=lambda *args: calls.append(args)
        ).generate_items()

        assert calls == []

    def test_called_once_before_join(self, memory_source) -> None:
        """Test the validator's arguments and timing."""
        reporter = CollectingReporter()
        options = BuilderOptions.for_strategy("inline", output_file="v.json", reporter=reporter)
        calls = []

        def validator(assets, strategy, surface):
            calls.append(([a.id for a in assets], strategy, surface))
            assert all(a.original_svg is None for a in assets)

        ViewerAssetsPipeline(memory_source, options, validator=validator).generate_items()

        assert calls == [(["alarm", "icons/wide"], "inline", reporter)]

    def test_validator_errors_propagate(self, memory_source, memory_writer) -> None:
        """Test that validator exceptions abort the build."""
        options = BuilderOptions.for_strategy(
            "inline", output_file="v.json", reporter=CollectingReporter()
        )

        def validator(assets, strategy, reporter):
            raise RuntimeError("duplicate ids")

        pipeline = ViewerAssetsPipeline(
            memory_source, options, writer=memory_writer, validator=validator
        )

        with pytest.raises(RuntimeError, match="duplicate ids"):
            pipeline.build()

        assert memory_writer.files == {}

    def test_default_validator_reports(self) -> None:
        """Test that the default validator warns through the reporter."""
        reporter = CollectingReporter()
        options = BuilderOptions.for_strategy("inline", output_file="v.json", reporter=reporter)
        source = MemorySource({"blob.svg": "<svg><path/></svg>"})

        ViewerAssetsPipeline(source, options).generate_items()

        assert len(reporter.warnings) == 1
        assert "Missing viewBox" in reporter.warnings[0]
