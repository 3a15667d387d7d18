"""Feed data models for decoded RSS documents.

Models are frozen: a decoded feed is a read-only view of the document it
came from.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from rsst.utils.dates import format_rfc2822, parse_rfc2822


def _parse_pub_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_rfc2822(value)
    return value


PubDate = Annotated[
    datetime,
    BeforeValidator(_parse_pub_date),
    PlainSerializer(format_rfc2822, return_type=str, when_used="json"),
]
"""Timezone-aware date-time read from and written as RFC 2822 text."""


def _parse_xml_bool(value: Any) -> Any:
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError(f"expected 'true' or 'false', got {value!r}")
    return value


def _parse_xml_unsigned(value: Any) -> Any:
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"expected an unsigned integer, got {value!r}")
        return int(value)
    return value


XmlBool = Annotated[bool, BeforeValidator(_parse_xml_bool), Field(strict=True)]
"""Boolean spelled exactly ``true`` or ``false``."""

XmlUnsignedInt = Annotated[int, BeforeValidator(_parse_xml_unsigned), Field(strict=True, ge=0)]
"""Non-negative integer written with ASCII digits only."""


class ContentMedium(str, Enum):
    """Kind of object a ``media:content`` element points at.

    Values are matched case-sensitively; there is no fallback member.
    """

    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"
    EXECUTABLE = "executable"


class FeedModel(BaseModel):
    """Base for all decoded feed entities."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Enclosure(FeedModel):
    """Media object attached to an item (``<enclosure>``)."""

    url: str = Field(..., description="Location of the attached file")
    length: XmlUnsignedInt = Field(..., description="Size in bytes")
    mime_type: str = Field(..., description="MIME type, from the 'type' attribute")


class Guid(FeedModel):
    """Unique item identifier (``<guid>``).

    ``is_perma_link`` has no default: a guid without ``isPermaLink`` does
    not decode.
    """

    value: str
    is_perma_link: XmlBool


class MediaContent(FeedModel):
    """Media RSS reference (``<media:content>``)."""

    url: str | None = None
    mime_type: str | None = None
    medium: ContentMedium | None = None


class Item(FeedModel):
    """One entry of a channel."""

    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    enclosure: Enclosure | None = None
    guid: Guid | None = None
    pub_date: PubDate | None = None
    content: str | None = Field(default=None, description="Full content (<content>, else content:encoded)")
    media: list[MediaContent] = Field(default_factory=list)


class Channel(FeedModel):
    """Feed-level metadata plus items in document order."""

    title: str
    link: str
    description: str | None = None
    language: str | None = None
    items: list[Item] = Field(default_factory=list)


class Feed(FeedModel):
    """Decoded ``<rss>`` document."""

    channel: Channel
