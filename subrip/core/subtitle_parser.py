"""Parse SubRip data into a Document."""

from __future__ import annotations

import codecs
from pathlib import Path

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
from subrip.core.grammar import (
    ErrorKind,
    GrammarFailure,
    Incomplete,
    Mismatch,
    char,
    line_ending,
    number,
    tag,
    take_until_and_consume,
    tagged,
)
from subrip.core.models import Document, Entry, Time
from subrip.utils.logger import get_logger

logger = get_logger(__name__)

ARROW = b" --> "
TEXT_TERMINATORS = (b"\n\n", b"\r\n\r\n")
# Every byte the grammar matches outside of text bodies
_GRAMMAR_ALPHABET = "0123456789:, ->\r\n"

_CLAUSE_ERRORS: dict[ErrorKind, type[ParseError]] = {
    ErrorKind.START_TIME: InvalidStartTimeError,
    ErrorKind.ARROW: MissingArrowError,
    ErrorKind.END_TIME: InvalidEndTimeError,
}


def parse_time(data: bytes, pos: int = 0) -> tuple[Time, int]:
    """Parse a ``H:M:S,ms`` timecode starting at ``pos``."""
    hours, pos = number(data, pos, 8)
    _, pos = char(data, pos, ":")
    minutes, pos = number(data, pos, 8)
    _, pos = char(data, pos, ":")
    seconds, pos = number(data, pos, 8)
    _, pos = char(data, pos, ",")
    milliseconds, pos = number(data, pos, 16)
    return Time(hours, minutes, seconds, milliseconds), pos


def check_encoding(encoding: str) -> str:
    """Return the codec name for ``encoding``.

    The encoding only applies to text bodies, but indexes, timecodes and
    line endings are matched as ASCII bytes, so the codec must encode
    them unchanged. UTF-16 and UTF-32 are rejected.
    """
    try:
        name = codecs.lookup(encoding).name
        compatible = _GRAMMAR_ALPHABET.encode(name) == _GRAMMAR_ALPHABET.encode("ascii")
    except (LookupError, UnicodeError) as err:
        raise UnsupportedEncodingError(repr(encoding)) from err
    if not compatible:
        raise UnsupportedEncodingError(f"{encoding!r} is not ASCII-compatible")
    return name


def _parse_text(
    data: bytes,
    pos: int,
    encoding: str,
    allow_unterminated: bool,
) -> tuple[str, int]:
    try:
        raw, end = take_until_and_consume(data, pos, TEXT_TERMINATORS)
    except Incomplete:
        if not allow_unterminated:
            raise
        raw, end = data[pos:], len(data)
        for ending in (b"\r\n", b"\n"):
            if raw.endswith(ending):
                raw = raw[: -len(ending)]
                break
    try:
        return raw.decode(encoding), end
    except UnicodeDecodeError as err:
        raise Mismatch(ErrorKind.DECODE, pos + err.start) from err


def parse_entry(
    data: bytes,
    pos: int = 0,
    *,
    encoding: str = "utf-8",
    allow_unterminated: bool = False,
) -> tuple[Entry, int]:
    """Parse one cue starting at ``pos``.

    Failures in the start time, arrow and end time clauses are re-tagged
    so the caller can tell which clause was wrong.
    """
    index, pos = number(data, pos, 32)
    _, pos = line_ending(data, pos)
    with tagged(ErrorKind.START_TIME):
        start_time, pos = parse_time(data, pos)
    with tagged(ErrorKind.ARROW):
        _, pos = tag(data, pos, ARROW)
    with tagged(ErrorKind.END_TIME):
        end_time, pos = parse_time(data, pos)
    _, pos = line_ending(data, pos)
    text, pos = _parse_text(data, pos, encoding, allow_unterminated)
    return Entry(index, start_time, end_time, text), pos


def parse_document(
    data: bytes,
    *,
    encoding: str = "utf-8",
    allow_unterminated: bool = False,
) -> Document:
    """Parse entries until the buffer is exhausted.

    Raises GrammarFailure; ``parse_bytes`` is the public wrapper.
    """
    entries: list[Entry] = []
    pos = 0
    while pos < len(data):
        entry, pos = parse_entry(
            data,
            pos,
            encoding=encoding,
            allow_unterminated=allow_unterminated,
        )
        entries.append(entry)
    return Document(tuple(entries))


def _to_parse_error(failure: GrammarFailure) -> ParseError:
    if isinstance(failure, Incomplete):
        return IncompleteInputError(position=failure.position)
    error_cls = _CLAUSE_ERRORS.get(failure.kind)
    if error_cls is not None:
        return error_cls(position=failure.position)
    return UnknownParseError(f"unexpected {failure.kind.value}", failure.position)


def parse_bytes(
    data: bytes,
    *,
    encoding: str = "utf-8",
    allow_unterminated: bool = False,
) -> Document:
    """Parse a complete SubRip buffer.

    Raises a ParseError subclass on any failure; a partial Document is
    never returned.
    """
    check_encoding(encoding)
    try:
        document = parse_document(
            data,
            encoding=encoding,
            allow_unterminated=allow_unterminated,
        )
    except GrammarFailure as failure:
        error = _to_parse_error(failure)
        logger.debug("SRT parse failed: %s", error)
        raise error from failure
    if not document:
        raise UnknownParseError("no subtitle entries found", 0)
    logger.debug("Parsed %d subtitle entries", len(document))
    return document


def parse_string(
    content: str,
    *,
    encoding: str = "utf-8",
    allow_unterminated: bool = False,
) -> Document:
    """Parse subtitle content from a string.

    ``encoding`` must be ASCII-compatible, see ``check_encoding``.
    """
    check_encoding(encoding)
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as err:
        raise UnsupportedEncodingError(str(err)) from err
    return parse_bytes(
        data,
        encoding=encoding,
        allow_unterminated=allow_unterminated,
    )


def parse_file(
    path: Path | str,
    *,
    encoding: str = "utf-8",
    allow_unterminated: bool = False,
) -> Document:
    """Read a subtitle file fully and parse it."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as err:
        raise SrtIOError(err) from err
    logger.debug("Parsing %s (%d bytes)", path, len(data))
    return parse_bytes(data, encoding=encoding, allow_unterminated=allow_unterminated)
