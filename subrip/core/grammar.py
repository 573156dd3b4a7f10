"""Byte-cursor parsing primitives.

Every primitive takes the whole buffer plus a position and returns
``(value, new_position)``. A rule that cannot match raises ``Mismatch``;
a rule that runs out of bytes before it can decide raises ``Incomplete``.
The two are kept apart so callers can tell truncated input from bad input.
"""

from __future__ import annotations

import enum
from contextlib import contextmanager
from typing import Iterator, Sequence


class ErrorKind(enum.Enum):
    CHAR = "char"
    TAG = "tag"
    DIGIT = "digit"
    NUMBER_RANGE = "number_range"
    LINE_ENDING = "line_ending"
    TAKE_UNTIL = "take_until"
    DECODE = "decode"
    # Entry clauses
    START_TIME = "start_time"
    ARROW = "arrow"
    END_TIME = "end_time"


class GrammarFailure(Exception):
    def __init__(self, kind: ErrorKind, position: int):
        self.kind = kind
        self.position = position
        super().__init__(f"{kind.value} at byte {position}")


class Mismatch(GrammarFailure):
    """The input at ``position`` does not match the rule."""


class Incomplete(GrammarFailure):
    """The buffer ended while the rule still needed ``needed`` more bytes."""

    def __init__(self, kind: ErrorKind, position: int, needed: int | None = None):
        self.needed = needed
        super().__init__(kind, position)


def digits(data: bytes, pos: int) -> tuple[bytes, int]:
    """Match one or more ASCII digits.

    A run that reaches the end of the buffer is complete.
    """
    end = pos
    while end < len(data) and 0x30 <= data[end] <= 0x39:
        end += 1
    if end == pos:
        if pos >= len(data):
            raise Incomplete(ErrorKind.DIGIT, pos, needed=1)
        raise Mismatch(ErrorKind.DIGIT, pos)
    return data[pos:end], end


def number(data: bytes, pos: int, bits: int) -> tuple[int, int]:
    """Match a digit run and decode it as an unsigned ``bits``-wide integer."""
    token, end = digits(data, pos)
    significant = token.lstrip(b"0") or b"0"
    # Huge runs cannot fit and would trip int()'s digit limit
    if len(significant) > len(str((1 << bits) - 1)):
        raise Mismatch(ErrorKind.NUMBER_RANGE, pos)
    value = int(significant)
    if value >= 1 << bits:
        raise Mismatch(ErrorKind.NUMBER_RANGE, pos)
    return value, end


def char(data: bytes, pos: int, expected: str) -> tuple[str, int]:
    if pos >= len(data):
        raise Incomplete(ErrorKind.CHAR, pos, needed=1)
    if data[pos] != ord(expected):
        raise Mismatch(ErrorKind.CHAR, pos)
    return expected, pos + 1


def tag(data: bytes, pos: int, literal: bytes) -> tuple[bytes, int]:
    """Match ``literal`` exactly.

    A buffer that ends partway through a matching prefix is Incomplete.
    """
    available = data[pos:pos + len(literal)]
    if not literal.startswith(available):
        raise Mismatch(ErrorKind.TAG, pos)
    if len(available) < len(literal):
        raise Incomplete(ErrorKind.TAG, pos, needed=len(literal) - len(available))
    return literal, pos + len(literal)


def line_ending(data: bytes, pos: int) -> tuple[bytes, int]:
    """Match ``\\n`` or ``\\r\\n``."""
    if pos >= len(data):
        raise Incomplete(ErrorKind.LINE_ENDING, pos, needed=1)
    if data[pos] == 0x0A:
        return b"\n", pos + 1
    if data[pos] == 0x0D:
        if pos + 1 >= len(data):
            raise Incomplete(ErrorKind.LINE_ENDING, pos, needed=1)
        if data[pos + 1] == 0x0A:
            return b"\r\n", pos + 2
    raise Mismatch(ErrorKind.LINE_ENDING, pos)


def take_until_and_consume(
    data: bytes,
    pos: int,
    delimiters: Sequence[bytes],
) -> tuple[bytes, int]:
    """Return the bytes before the earliest delimiter and skip past it."""
    best: tuple[int, bytes] | None = None
    for delimiter in delimiters:
        found = data.find(delimiter, pos)
        if found != -1 and (best is None or found < best[0]):
            best = (found, delimiter)
    if best is None:
        raise Incomplete(ErrorKind.TAKE_UNTIL, len(data))
    found, delimiter = best
    return data[pos:found], found + len(delimiter)


@contextmanager
def tagged(kind: ErrorKind) -> Iterator[None]:
    """Re-tag any Mismatch raised inside the block as ``kind``.

    Incomplete failures pass through unchanged.
    """
    try:
        yield
    except Mismatch as err:
        raise Mismatch(kind, err.position) from err
