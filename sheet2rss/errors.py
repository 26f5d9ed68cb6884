"""Exception types raised while refreshing the feed."""


class Sheet2RSSError(Exception):
    """Base class for refresh-path failures."""


class FetchError(Sheet2RSSError):
    """The spreadsheet export could not be retrieved."""


class ParseError(Sheet2RSSError):
    """The CSV export (or a rendered feed) could not be parsed."""


class EmptyInput(Sheet2RSSError):
    """The CSV export has no data rows below the header."""


class SerializationError(Sheet2RSSError):
    """The feed document could not be rendered to bytes."""
