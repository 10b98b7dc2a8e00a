"""Shared fixtures for viewer assets tests."""

import pytest

from svg_viewer_assets import BuilderOptions, MemorySource, MemoryWriter

ALARM_SVG = '<svg width="20" height="20" viewBox="0 0 20 20"><path d="M0 0h20v20H0z"/></svg>'
ALARM_ORIGINAL = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!-- Generator: Sketch -->\n'
    '<svg width="20" height="20" viewBox="0 0 20 20" version="1.1">\n'
    '  <title>alarm</title>\n'
    '  <path d="M0 0 L20 0 L20 20 L0 20 Z"/>\n'
    '</svg>\n'
)
WIDE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 24"><circle r="4"/></svg>'


@pytest.fixture
def icon_files() -> dict[str, str]:
    """A small optimized tree with one original missing."""
    return {
        "alarm.svg": ALARM_SVG,
        "icons/wide.svg": WIDE_SVG,
        "__original__/alarm.svg": ALARM_ORIGINAL,
    }


@pytest.fixture
def memory_source(icon_files):
    return MemorySource(icon_files)


@pytest.fixture
def inline_options() -> BuilderOptions:
    return BuilderOptions.for_strategy("inline", output_file="viewer.json")


@pytest.fixture
def memory_writer() -> MemoryWriter:
    return MemoryWriter()
