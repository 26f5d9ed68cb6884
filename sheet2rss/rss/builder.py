"""Conversion of CSV exports into feed documents."""

import csv
import io
from typing import IO

from sheet2rss.errors import EmptyInput, ParseError

from .mapper import entry_from_record
from .models import ChannelInfo, FeedDocument


def _read_text(source: bytes | str | IO) -> str:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, bytes):
        try:
            # utf-8-sig drops a leading byte order mark if present
            return source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"CSV export is not valid UTF-8: {e}") from e
    return source


def read_rows(source: bytes | str | IO) -> list[list[str]]:
    """
    Parse CSV content into rows, skipping blank lines.

    Args:
        source: CSV content as bytes, text or a readable file object

    Returns:
        All non-empty rows in file order

    Raises:
        ParseError: If the content is not UTF-8 or the CSV is malformed
    """
    text = _read_text(source)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        return [row for row in reader if row]
    except csv.Error as e:
        raise ParseError(f"Malformed CSV at line {reader.line_num}: {e}") from e


def build_feed(
    source: bytes | str | IO,
    max_entries: int,
    channel: ChannelInfo | None = None,
) -> FeedDocument:
    """
    Build a feed document from the most recent rows of a CSV export.

    The first row is the header. Rows are assumed to be appended in
    chronological order, so the last ``max_entries`` data rows are converted,
    newest (highest row index) first.

    Args:
        source: CSV content as bytes, text or a readable file object
        max_entries: Maximum number of entries in the feed
        channel: Channel metadata, defaults to ChannelInfo()

    Returns:
        FeedDocument holding ``min(max_entries, len(rows) - 1)`` entries

    Raises:
        ParseError: If the CSV cannot be parsed
        EmptyInput: If there is no data row below the header
        ValueError: If max_entries is less than 1
    """
    if max_entries < 1:
        raise ValueError(f"max_entries must be at least 1, got {max_entries}")

    rows = read_rows(source)
    if len(rows) < 2:
        raise EmptyInput(f"CSV export has {len(rows)} row(s), need a header and data")

    headers, data = rows[0], rows[1:]
    start = max(len(data) - max_entries, 0)
    entries = tuple(
        entry_from_record(headers, data[i]) for i in range(len(data) - 1, start - 1, -1)
    )

    channel = channel or ChannelInfo()
    return FeedDocument(
        title=channel.title,
        link=channel.link,
        description=channel.description,
        entries=entries,
    )
