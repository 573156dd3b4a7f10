"""Write subtitle documents back to SubRip text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from subrip.core.errors import SrtIOError, UnsupportedEncodingError
from subrip.core.models import Document, Entry
from subrip.core.subtitle_parser import check_encoding
from subrip.utils.logger import get_logger

logger = get_logger(__name__)


def render(entries: Document | Iterable[Entry]) -> str:
    """Render entries as SubRip text, each followed by a blank line."""
    if not isinstance(entries, Document):
        entries = Document(tuple(entries))
    return entries.to_srt()


def build_file(
    entries: Document | Iterable[Entry],
    output_path: Path,
    encoding: str = "utf-8",
) -> None:
    """Write subtitle entries to a file."""
    check_encoding(encoding)
    text = render(entries)
    try:
        # newline="" keeps "\n" as-is on every platform
        with open(output_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except UnicodeEncodeError as err:
        raise UnsupportedEncodingError(str(err)) from err
    except OSError as err:
        raise SrtIOError(err) from err
    logger.debug("Wrote %s", output_path)
