"""Value types for parsed SubRip documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, order=True)
class Time:
    """Offset from the start of the video, as written in a timecode."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __str__(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d},{self.milliseconds:03d}"
        )

    @property
    def total_milliseconds(self) -> int:
        return (
            self.hours * 3600000
            + self.minutes * 60000
            + self.seconds * 1000
            + self.milliseconds
        )

    @classmethod
    def from_milliseconds(cls, ms: int) -> Time:
        """Build a normalized Time from a millisecond offset."""
        if ms < 0:
            raise ValueError(f"Time offset cannot be negative: {ms}")
        hours, ms = divmod(ms, 3600000)
        minutes, ms = divmod(ms, 60000)
        seconds, milliseconds = divmod(ms, 1000)
        return cls(hours, minutes, seconds, milliseconds)


@dataclass(frozen=True)
class Entry:
    index: int
    start_time: Time
    end_time: Time
    text: str

    def __str__(self) -> str:
        return f"{self.index}\n{self.start_time} --> {self.end_time}\n{self.text}\n"

    @property
    def duration_ms(self) -> int:
        # Not clamped; the parser does not require start <= end.
        return self.end_time.total_milliseconds - self.start_time.total_milliseconds


@dataclass(frozen=True)
class Document:
    """Ordered cues of one SubRip source."""

    entries: tuple[Entry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> Entry:
        return self.entries[i]

    def __str__(self) -> str:
        return self.to_srt()

    def to_srt(self) -> str:
        """Render every entry, separated by a blank line.

        The result parses back to an equal Document.
        """
        return "".join(f"{entry}\n" for entry in self.entries)
