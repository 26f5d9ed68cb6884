"""Tests for converting CSV exports into feed documents."""

import io

import pytest

from sheet2rss.errors import EmptyInput, ParseError
from sheet2rss.rss.builder import build_feed, read_rows
from sheet2rss.rss.models import ChannelInfo

HEADER = "date,description,article,activity,branch,detail\n"

SAMPLE_CSV = (
    HEADER
    + "1/2/2017,Bill signed,http://x/1,signing,executive,Some detail\n"
    + "1/5/2017,Vote held,http://x/2,vote,legislative,Another detail\n"
)


def make_csv(rows: int) -> str:
    """Build a CSV export with the given number of data rows."""
    lines = [HEADER]
    for i in range(rows):
        day = (i % 28) + 1
        lines.append(f"1/{day}/2017,Event {i},http://x/{i},act,branch,Detail {i}\n")
    return "".join(lines)


def test_two_row_scenario_is_newest_first():
    """Test the reference two-row export end to end."""
    document = build_feed(SAMPLE_CSV.encode(), 20)

    assert len(document.entries) == 2

    first, second = document.entries
    assert first.title == "Vote held"
    assert first.link == "http://x/2"
    assert first.category == "vote,legislative"
    assert first.description == "Another detail"
    assert first.pub_date == "Thu, 05 Jan 2017 00:00:00 +0000"

    assert second.title == "Bill signed"
    assert second.link == "http://x/1"
    assert second.category == "signing,executive"


@pytest.mark.parametrize(
    "rows, max_entries, expected",
    [(1, 20, 1), (5, 20, 5), (20, 20, 20), (25, 20, 20), (7, 3, 3), (3, 1, 1)],
)
def test_entry_count_is_capped(rows, max_entries, expected):
    """Test that exactly min(max_entries, data rows) entries are produced."""
    document = build_feed(make_csv(rows), max_entries)

    assert len(document.entries) == expected


def test_most_recent_rows_are_selected():
    """Test that the newest rows are kept when the export is truncated."""
    document = build_feed(make_csv(10), 3)

    assert [e.title for e in document.entries] == ["Event 9", "Event 8", "Event 7"]


def test_channel_metadata_defaults():
    """Test that the default channel constants are applied."""
    document = build_feed(SAMPLE_CSV, 20)

    assert document.title == "Federal Government 2017"
    assert document.link == "http://jlord.us/federal-gov/"
    assert document.description == "Summaries of events from the US Government."


def test_custom_channel_metadata():
    """Test that a supplied ChannelInfo is used for the document."""
    channel = ChannelInfo(title="T", link="http://example.com/", description="D")

    document = build_feed(SAMPLE_CSV, 20, channel)

    assert (document.title, document.link, document.description) == (
        "T",
        "http://example.com/",
        "D",
    )


@pytest.mark.parametrize("content", ["", HEADER, "\n\n" + HEADER + "\n"])
def test_fewer_than_two_rows_raises_empty_input(content):
    """Test that a header alone (or nothing) is rejected."""
    with pytest.raises(EmptyInput):
        build_feed(content, 20)


def test_blank_lines_are_skipped():
    """Test that blank lines between rows are not treated as records."""
    content = HEADER + "\n1/2/2017,Only,http://x/1,a,b,c\n\n"

    document = build_feed(content, 20)

    assert [e.title for e in document.entries] == ["Only"]


def test_unterminated_quote_raises_parse_error():
    """Test that malformed quoting surfaces as ParseError."""
    content = HEADER + '1/2/2017,"Unterminated,http://x/1,a,b,c\n'

    with pytest.raises(ParseError):
        build_feed(content, 20)


def test_invalid_utf8_raises_parse_error():
    """Test that undecodable bytes surface as ParseError."""
    with pytest.raises(ParseError):
        build_feed(HEADER.encode() + b"\xff\xfe,bad\n", 20)


def test_quoted_fields_keep_commas_and_newlines():
    """Test that quoted CSV fields are unescaped."""
    content = (
        HEADER + '1/2/2017,"Title, with comma",http://x/1,a,b,"line one\nline two"\n'
    )

    (entry,) = build_feed(content, 20).entries

    assert entry.title == "Title, with comma"
    assert entry.description == "line one\nline two"


def test_accepts_binary_file_object_with_bom():
    """Test reading from a binary stream that starts with a BOM."""
    source = io.BytesIO(b"\xef\xbb\xbf" + SAMPLE_CSV.encode())

    document = build_feed(source, 20)

    assert document.entries[0].title == "Vote held"


def test_ragged_rows_are_accepted():
    """Test that rows with differing field counts still parse."""
    rows = read_rows(HEADER + "1/2/2017,Short\n")

    assert rows[1] == ["1/2/2017", "Short"]


def test_max_entries_must_be_positive():
    """Test that a zero cap is rejected."""
    with pytest.raises(ValueError):
        build_feed(SAMPLE_CSV, 0)


def test_text_after_closing_quote_raises_parse_error():
    """Test that a quoted field followed by stray text is rejected."""
    with pytest.raises(ParseError):
        read_rows(HEADER + '1/2/2017,"Title"junk,http://x/1,a,b,c\n')


def test_bare_quote_in_unquoted_field_is_kept():
    """Test that a quote inside an unquoted field is read literally."""
    rows = read_rows(HEADER + '1/2/2017,The "Act",http://x/1,a,b,c\n')

    assert rows[1][1] == 'The "Act"'
