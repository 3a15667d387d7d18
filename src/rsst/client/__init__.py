"""Client package."""

from rsst.client.request import RssRequest, fetch_feed, parse_uri, resolve_redirect
from rsst.client.response import RssResponse

__all__ = [
    "RssRequest",
    "RssResponse",
    "fetch_feed",
    "parse_uri",
    "resolve_redirect",
]
