"""subrip - Parse and render SubRip (.srt) subtitles."""

from subrip.core.errors import (
    IncompleteInputError,
    InvalidEndTimeError,
    InvalidStartTimeError,
    MissingArrowError,
    ParseError,
    SrtIOError,
    UnknownParseError,
    UnsupportedEncodingError,
)
from subrip.core.models import Document, Entry, Time
from subrip.core.subtitle_builder import build_file, render
from subrip.core.subtitle_parser import parse_bytes, parse_file, parse_string

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Entry",
    "IncompleteInputError",
    "InvalidEndTimeError",
    "InvalidStartTimeError",
    "MissingArrowError",
    "ParseError",
    "SrtIOError",
    "Time",
    "UnknownParseError",
    "UnsupportedEncodingError",
    "build_file",
    "parse_bytes",
    "parse_file",
    "parse_string",
    "render",
]
