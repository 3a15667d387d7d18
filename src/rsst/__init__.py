"""rsst: fetch RSS feeds over HTTP and decode them into typed models."""

from rsst.client import RssRequest, RssResponse, fetch_feed
from rsst.exceptions import (
    ConfigurationError,
    EncodingError,
    InvalidUriError,
    RssError,
    TooManyRedirectsError,
    TransportError,
    UnexpectedResponseError,
    UnresolvableRedirectError,
    XmlDecodeError,
    XmlParseError,
)
from rsst.models import (
    Channel,
    ContentMedium,
    Enclosure,
    Feed,
    Guid,
    Item,
    MediaContent,
)

__version__ = "0.1.0"

__all__ = [
    "RssRequest",
    "RssResponse",
    "fetch_feed",
    "Feed",
    "Channel",
    "Item",
    "Enclosure",
    "Guid",
    "MediaContent",
    "ContentMedium",
    "RssError",
    "ConfigurationError",
    "TransportError",
    "InvalidUriError",
    "EncodingError",
    "XmlParseError",
    "XmlDecodeError",
    "UnexpectedResponseError",
    "UnresolvableRedirectError",
    "TooManyRedirectsError",
]
