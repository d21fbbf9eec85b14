"""
Chunk sort errors.
"""

from __future__ import annotations


class ChunkSortError(RuntimeError):
    """
    Base error for everything the sorter can raise.

    Extra keyword context is kept on the instance so the CLI can report
    which input (file, line) a failure belongs to.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ConfigurationError(ChunkSortError):
    """Raised for an unknown sort algorithm or an unusable setting."""


class InputIOError(ChunkSortError):
    """Raised when an input file or directory cannot be read or written."""


class MalformedIntegerError(ChunkSortError):
    """
    Raised on the first line of an input that is not a valid integer.
    """

    def __init__(self, line_number: int, text: str, *, source: str | None = None) -> None:
        super().__init__(f"invalid integer at line {line_number}", source=source)
        self.line_number = line_number
        self.text = text


class InsufficientInputError(ChunkSortError):
    """
    Raised when an input holds fewer integers than the configured minimum.
    """

    def __init__(self, observed: int, minimum: int, *, source: str | None = None) -> None:
        if source:
            message = f"{source} has fewer than {minimum} numbers"
        else:
            message = f"Input must contain at least {minimum} valid integers"
        super().__init__(message, source=source)
        self.observed = observed
        self.minimum = minimum
