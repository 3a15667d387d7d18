"""Table-driven decoding of RSS XML into feed models.

Each model has a row in :data:`RULES` saying where every one of its fields
comes from: a child element's text, an attribute, the element's own text, or
one or more nested entities. Decoding walks the document once, collecting a
plain dict per entity, and hands the result to pydantic for typing and
required/optional checks. Either the whole feed validates or nothing is
returned.

Tags are matched by exact qualified name. Plain RSS elements have no
namespace; extension elements use Clark notation (``{uri}local``), so
``media:content`` never collides with an unqualified ``content``. An item's
content comes from plain ``<content>``; ``content:encoded`` is read only when
that element is absent.
"""

from dataclasses import dataclass
from typing import Any
from xml.etree.ElementTree import Element

from pydantic import ValidationError

from rsst.exceptions import XmlDecodeError
from rsst.models.feed import (
    Channel,
    Enclosure,
    Feed,
    FeedModel,
    Guid,
    Item,
    MediaContent,
)

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
MEDIA_NS = "http://search.yahoo.com/mrss/"


@dataclass(frozen=True)
class Text:
    """Field read from the text of a single child element.

    When no ``tag`` element is present, the ``fallback`` tag is tried instead.
    """

    field: str
    tag: str
    fallback: str | None = None


@dataclass(frozen=True)
class Attr:
    """Field read from an attribute of the element itself."""

    field: str
    name: str


@dataclass(frozen=True)
class ElementText:
    """Field read from the element's own text content."""

    field: str


@dataclass(frozen=True)
class Child:
    """Field holding one nested entity."""

    field: str
    tag: str
    model: type[FeedModel]


@dataclass(frozen=True)
class Children:
    """Field holding every matching nested entity, in document order."""

    field: str
    tag: str
    model: type[FeedModel]


Rule = Text | Attr | ElementText | Child | Children

RULES: dict[type[FeedModel], tuple[Rule, ...]] = {
    Feed: (Child("channel", "channel", Channel),),
    Channel: (
        Text("title", "title"),
        Text("link", "link"),
        Text("description", "description"),
        Text("language", "language"),
        Children("items", "item", Item),
    ),
    Item: (
        Text("title", "title"),
        Text("link", "link"),
        Text("description", "description"),
        Text("author", "author"),
        Child("enclosure", "enclosure", Enclosure),
        Child("guid", "guid", Guid),
        Text("pub_date", "pubDate"),
        Text("content", "content", fallback=f"{{{CONTENT_NS}}}encoded"),
        Children("media", f"{{{MEDIA_NS}}}content", MediaContent),
    ),
    Enclosure: (
        Attr("url", "url"),
        Attr("length", "length"),
        Attr("mime_type", "type"),
    ),
    Guid: (
        ElementText("value"),
        Attr("is_perma_link", "isPermaLink"),
    ),
    MediaContent: (
        Attr("url", "url"),
        Attr("mime_type", "type"),
        Attr("medium", "medium"),
    ),
}


def _text(element: Element) -> str:
    return "".join(element.itertext())


def _collect(
    element: Element,
    model: type[FeedModel],
    path: tuple[str | int, ...],
    errors: list[dict[str, Any]],
) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for rule in RULES[model]:
        if isinstance(rule, Attr):
            value = element.get(rule.name)
            if value is not None:
                data[rule.field] = value
        elif isinstance(rule, ElementText):
            data[rule.field] = _text(element)
        elif isinstance(rule, Children):
            data[rule.field] = [
                _collect(child, rule.model, (*path, rule.field, index), errors)
                for index, child in enumerate(element.findall(rule.tag))
            ]
        else:
            tag = rule.tag
            matches = element.findall(tag)
            if not matches and isinstance(rule, Text) and rule.fallback:
                tag = rule.fallback
                matches = element.findall(tag)
            if not matches:
                continue
            if len(matches) > 1:
                errors.append({"loc": (*path, rule.field), "msg": f"duplicate element <{tag}>"})
            if isinstance(rule, Text):
                data[rule.field] = _text(matches[0])
            else:
                data[rule.field] = _collect(matches[0], rule.model, (*path, rule.field), errors)
    return data


def _describe(errors: list[dict[str, Any]]) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in errors
    )


def decode(element: Element, model: type[FeedModel] = Feed) -> Any:
    """Decode an element into ``model`` using the rules table.

    Args:
        element: Element matching ``model`` (the ``<rss>`` root for Feed).
        model: Any model with an entry in :data:`RULES`.

    Returns:
        A validated instance of ``model``.

    Raises:
        XmlDecodeError: When a required field is missing, a singular
            element is repeated, or a value has the wrong type or format.
    """
    errors: list[dict[str, Any]] = []
    data = _collect(element, model, (), errors)
    if errors:
        raise XmlDecodeError(_describe(errors), errors)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [{"loc": tuple(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        raise XmlDecodeError(_describe(errors), errors) from e


def decode_feed(root: Element) -> Feed:
    """Decode an ``<rss>`` root element into a :class:`Feed`."""
    return decode(root, Feed)
