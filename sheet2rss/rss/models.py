"""Pydantic models for the generated RSS feed."""

from pydantic import BaseModel, ConfigDict


class FeedEntry(BaseModel):
    """A single feed item mapped from one spreadsheet row."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: str = ""
    category: str = ""


class ChannelInfo(BaseModel):
    """Channel-level metadata written at the top of the feed."""

    model_config = ConfigDict(frozen=True)

    title: str = "Federal Government 2017"
    link: str = "http://jlord.us/federal-gov/"
    description: str = "Summaries of events from the US Government."


class FeedDocument(BaseModel):
    """A complete RSS channel with its entries, newest first."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    description: str
    entries: tuple[FeedEntry, ...] = ()
