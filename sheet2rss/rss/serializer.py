"""Rendering of feed documents as RSS 2.0 XML."""

import re
import xml.etree.ElementTree as ET

from sheet2rss.errors import ParseError, SerializationError

from .models import FeedDocument, FeedEntry

XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" ?>'
RSS_VERSION = "2.0"
CARRIAGE_RETURN_REF = b"&#13;"

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _clean(text: str) -> str:
    return _INVALID_XML_CHARS.sub("\ufffd", text)


def _sub(parent: ET.Element, tag: str, text: str) -> None:
    ET.SubElement(parent, tag).text = _clean(text)


def serialize_feed(document: FeedDocument) -> bytes:
    """
    Render a feed document as RSS 2.0.

    ``pubDate`` and ``category`` are omitted for entries that have none.
    Carriage returns are written as character references so that they
    survive parsing.
    The output carries no XML declaration; prepend XML_DECLARATION when
    serving it as a standalone document.

    Raises:
        SerializationError: If the document cannot be rendered
    """
    try:
        rss = ET.Element("rss", version=RSS_VERSION)
        channel = ET.SubElement(rss, "channel")
        _sub(channel, "title", document.title)
        _sub(channel, "link", document.link)
        _sub(channel, "description", document.description)

        for entry in document.entries:
            item = ET.SubElement(channel, "item")
            _sub(item, "title", entry.title)
            _sub(item, "link", entry.link)
            _sub(item, "description", entry.description)
            if entry.pub_date:
                _sub(item, "pubDate", entry.pub_date)
            if entry.category:
                _sub(item, "category", entry.category)

        content = ET.tostring(rss, encoding="utf-8")
        # Parsers fold a literal CR into LF, so carry it as a character reference
        return content.replace(b"\r", CARRIAGE_RETURN_REF)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize feed: {e}") from e


def parse_feed(content: bytes) -> FeedDocument:
    """
    Parse RSS 2.0 content produced by serialize_feed.

    Raises:
        ParseError: If the content is not a well-formed RSS document
    """
    try:
        rss = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Invalid feed XML: {e}") from e

    channel = rss.find("channel")
    if rss.tag != "rss" or channel is None:
        raise ParseError("Feed has no <rss><channel> element")

    entries = tuple(
        FeedEntry(
            title=item.findtext("title", default=""),
            link=item.findtext("link", default=""),
            description=item.findtext("description", default=""),
            pub_date=item.findtext("pubDate", default=""),
            category=item.findtext("category", default=""),
        )
        for item in channel.findall("item")
    )

    return FeedDocument(
        title=channel.findtext("title", default=""),
        link=channel.findtext("link", default=""),
        description=channel.findtext("description", default=""),
        entries=entries,
    )
