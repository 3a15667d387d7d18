"""Models package."""

from rsst.models.feed import (
    Channel,
    ContentMedium,
    Enclosure,
    Feed,
    Guid,
    Item,
    MediaContent,
    PubDate,
)

__all__ = [
    "Feed",
    "Channel",
    "Item",
    "Enclosure",
    "Guid",
    "MediaContent",
    "ContentMedium",
    "PubDate",
]
