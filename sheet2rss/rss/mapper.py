"""Mapping of spreadsheet rows onto feed entries."""

from typing import Sequence

from .dates import format_pub_date, parse_date
from .models import FeedEntry

CATEGORY_COLUMNS = ("activity", "branch")


def entry_from_record(headers: Sequence[str], fields: Sequence[str]) -> FeedEntry:
    """Build a FeedEntry from a header row and one data row.

    Columns are matched by exact, case-sensitive name:

    - ``date``: publication date
    - ``description``: entry title
    - ``article``: entry link
    - ``activity`` and ``branch``: categories, comma-joined in column order
    - ``detail``: entry description

    Unknown columns are ignored, absent columns leave the field empty and
    a row shorter than the header is padded with empty strings.
    """
    values: dict[str, str] = {}
    categories: list[str] = []

    for i, header in enumerate(headers):
        field = fields[i] if i < len(fields) else ""
        if header == "date":
            values["pub_date"] = format_pub_date(parse_date(field))
        elif header == "description":
            values["title"] = field
        elif header == "article":
            values["link"] = field
        elif header in CATEGORY_COLUMNS:
            categories.append(field)
        elif header == "detail":
            values["description"] = field

    return FeedEntry(category=",".join(categories), **values)
