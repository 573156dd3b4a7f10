"""Errors raised by the public parsing entry points."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every failure reported by subrip."""

    description = "Unknown error"

    def __init__(self, detail: str | None = None, position: int | None = None):
        self.detail = detail
        self.position = position
        super().__init__(detail or self.description)

    def __str__(self) -> str:
        text = f"ParseError: {self.description}"
        if self.detail:
            text += f": {self.detail}"
        if self.position is not None:
            text += f" (at byte {self.position})"
        return text


class SrtIOError(ParseError):
    """Opening, reading or writing a subtitle file failed."""

    description = "I/O error"

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(str(error))


class IncompleteInputError(ParseError):
    """The buffer ended before a grammar rule could finish."""

    description = "SRT data are missing"


class InvalidStartTimeError(ParseError):
    description = "Wrong start time format"


class MissingArrowError(ParseError):
    description = "Expected '-->' between start and end time"


class InvalidEndTimeError(ParseError):
    description = "Wrong end time format"


class UnknownParseError(ParseError):
    """Any other mismatch: bad index, bad line ending, undecodable text, no entries."""

    description = "Unknown error"


class UnsupportedEncodingError(UnknownParseError):
    """The requested text encoding is unknown or not ASCII-compatible."""

    description = "Unsupported text encoding"
