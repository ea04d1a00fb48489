"""
Exception hierarchy for the package.xml viewer.

Every failure the viewer reports to the user derives from ``ViewerError`` so the
CLI can map it to an exit code in one place.
"""

from pathlib import Path
from typing import Iterable, Optional


class ViewerError(Exception):
    """Base class for all viewer errors."""
    pass


class FileReadError(ViewerError):
    """Raised when the manifest file cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class ParseError(ViewerError):
    """Raised when a manifest cannot be turned into components."""
    pass


class MalformedXmlError(ParseError):
    """Raised when the input is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f" (line {line}" + (f", column {column})" if column is not None else ")")
        super().__init__(f"Malformed XML{location}: {message}")


class MissingTypeNameError(ParseError):
    """Raised when a <types> block has no <name> element.

    Args:
        block_index: 1-based position of the block among the root's <types> elements
        line: Source line of the block, if known
    """

    def __init__(self, block_index: int, line: Optional[int] = None):
        self.block_index = block_index
        self.line = line
        location = f" at line {line}" if line is not None else ""
        super().__init__(f"<types> block #{block_index}{location} has no <name> element")


class InvalidOptionError(ViewerError):
    """Raised when an option value is not one of the allowed values."""

    def __init__(self, option: str, value: object, allowed: Iterable[str]):
        self.option = option
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid value {value!r} for {option}; choose from: {', '.join(self.allowed)}"
        )


class RenderError(ViewerError):
    """Base class for output errors."""
    pass


class RenderIoError(RenderError):
    """Raised when rendered output cannot be written."""
    pass
