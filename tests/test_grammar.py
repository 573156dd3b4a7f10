"""Tests for the byte-cursor parsing primitives."""

import pytest

from subrip.core.grammar import (
    ErrorKind,
    Incomplete,
    Mismatch,
    char,
    digits,
    line_ending,
    number,
    tag,
    take_until_and_consume,
    tagged,
)


class TestDigits:
    def test_run_to_end_of_buffer(self):
        assert digits(b"123", 0) == (b"123", 3)

    def test_stops_at_non_digit(self):
        assert digits(b"12:", 0) == (b"12", 2)

    def test_no_digit(self):
        with pytest.raises(Mismatch):
            digits(b"a1", 0)

    def test_empty(self):
        with pytest.raises(Incomplete):
            digits(b"", 0)


def test_number_range():
    assert number(b"255", 0, 8) == (255, 3)
    with pytest.raises(Mismatch) as exc:
        number(b"256", 0, 8)
    assert exc.value.kind is ErrorKind.NUMBER_RANGE


def test_char():
    assert char(b":", 0, ":") == (":", 1)
    with pytest.raises(Mismatch):
        char(b",", 0, ":")
    with pytest.raises(Incomplete):
        char(b"", 0, ":")


class TestTag:
    def test_match(self):
        assert tag(b" --> x", 0, b" --> ") == (b" --> ", 5)

    def test_mismatch(self):
        with pytest.raises(Mismatch):
            tag(b" -a-> ", 0, b" --> ")

    def test_partial_prefix_is_incomplete(self):
        with pytest.raises(Incomplete) as exc:
            tag(b" --", 0, b" --> ")
        assert exc.value.needed == 2


class TestLineEnding:
    def test_lf(self):
        assert line_ending(b"\nx", 0) == (b"\n", 1)

    def test_crlf(self):
        assert line_ending(b"\r\nx", 0) == (b"\r\n", 2)

    def test_lone_cr_at_end(self):
        with pytest.raises(Incomplete):
            line_ending(b"\r", 0)

    def test_other(self):
        with pytest.raises(Mismatch):
            line_ending(b"\rx", 0)


def test_take_until_earliest_delimiter():
    data = b"a\r\n\r\nb\n\n"
    assert take_until_and_consume(data, 0, (b"\n\n", b"\r\n\r\n")) == (b"a", 5)
    assert take_until_and_consume(data, 5, (b"\n\n", b"\r\n\r\n")) == (b"b", 8)


def test_take_until_missing():
    with pytest.raises(Incomplete):
        take_until_and_consume(b"abc\n", 0, (b"\n\n",))


def test_tagged_retags_mismatch_only():
    with pytest.raises(Mismatch) as exc:
        with tagged(ErrorKind.ARROW):
            tag(b"xyz", 0, b" --> ")
    assert exc.value.kind is ErrorKind.ARROW

    with pytest.raises(Incomplete) as exc:
        with tagged(ErrorKind.ARROW):
            tag(b" -", 0, b" --> ")
    assert exc.value.kind is ErrorKind.TAG


def test_number_rejects_huge_run():
    with pytest.raises(Mismatch) as exc:
        number(b"1" * 5000, 0, 32)
    assert exc.value.kind is ErrorKind.NUMBER_RANGE
    assert exc.value.position == 0


def test_number_ignores_leading_zeros():
    assert number(b"0" * 5000 + b"7:", 0, 8) == (7, 5001)
