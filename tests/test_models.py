"""Tests for the subtitle value types."""

import pytest

from subrip.core.models import Document, Entry, Time
from subrip.core.subtitle_parser import parse_bytes, parse_time


def test_time_display():
    assert str(Time(1, 42, 5, 123)) == "01:42:05,123"
    assert str(Time(0, 1, 6, 10)) == "00:01:06,010"


def test_time_round_trip():
    time = Time(1, 42, 5, 123)
    assert parse_time(str(time).encode())[0] == time


def test_time_milliseconds():
    time = Time(1, 2, 3, 4)
    assert time.total_milliseconds == 3723004
    assert Time.from_milliseconds(3723004) == time


def test_time_from_negative_milliseconds():
    with pytest.raises(ValueError):
        Time.from_milliseconds(-1)


def test_time_ordering():
    assert Time(0, 0, 1, 0) < Time(0, 0, 1, 1)
    assert Time(1, 0, 0, 0) > Time(0, 59, 59, 999)


def test_time_is_immutable():
    time = Time(0, 0, 0, 0)
    with pytest.raises(AttributeError):
        time.hours = 1


def test_entry_display():
    entry = Entry(3, Time(0, 0, 1, 0), Time(0, 0, 2, 500), "a\nb")
    assert str(entry) == "3\n00:00:01,000 --> 00:00:02,500\na\nb\n"
    assert entry.duration_ms == 1500


def test_document_sequence():
    entries = [
        Entry(1, Time(0, 0, 1, 0), Time(0, 0, 2, 0), "one"),
        Entry(2, Time(0, 0, 3, 0), Time(0, 0, 4, 0), "two"),
    ]
    doc = Document(entries)
    assert isinstance(doc.entries, tuple)
    assert len(doc) == 2
    assert list(doc) == entries
    assert doc[1].text == "two"


def test_document_render_reparses():
    doc = Document((
        Entry(1, Time(0, 0, 1, 0), Time(0, 0, 2, 0), "one"),
        Entry(2, Time(0, 0, 3, 0), Time(0, 0, 4, 0), "two\nlines"),
    ))
    text = str(doc)
    assert text == (
        "1\n00:00:01,000 --> 00:00:02,000\none\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\ntwo\nlines\n\n"
    )
    assert parse_bytes(text.encode()) == doc


def test_time_ordering_agrees_with_equality():
    a = Time(0, 0, 1, 0)
    b = Time(0, 0, 0, 1000)
    assert a != b
    assert (a <= b) == (a < b)
    assert (a >= b) == (a > b)
    assert sorted([a, b]) == sorted([b, a])
