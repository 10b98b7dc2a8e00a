"""Exceptions raised by the viewer assets pipeline."""


class MalformedSvgError(ValueError):
    """Raised when an optimized file does not parse as an SVG document."""

    def __init__(self, relative_path: str, reason: str):
        self.relative_path = relative_path
        self.reason = reason
        super().__init__(f"Malformed SVG in {relative_path}: {reason}")
