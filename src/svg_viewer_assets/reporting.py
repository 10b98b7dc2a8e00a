"""Reporting surface handed to asset validators."""

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Anything that can show a warning to the person running the build."""

    def warn(self, message: str) -> None: ...


class LoggingReporter:
    """Reporter that forwards warnings to a logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("svg_viewer_assets.validation")

    def warn(self, message: str) -> None:
        self.logger.warning(message)


class CollectingReporter:
    """Reporter that keeps warnings in memory, e.g. to assert on them."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)
