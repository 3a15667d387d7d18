"""Owning container for a fetched feed document.

An :class:`RssResponse` holds the body text, the XML document parsed from
it, and the :class:`~rsst.models.feed.Feed` decoded from that document. The
three are built together and released together: construction either
completes every step or raises, so no caller ever sees a half-built
response.
"""

from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring as safe_fromstring

from rsst.exceptions import EncodingError, XmlParseError
from rsst.models.feed import Feed
from rsst.parsers.schema import decode_feed


class RssResponse:
    """Body text, XML document and decoded feed with a single lifetime.

    Only :attr:`feed` is exposed. Build instances with :meth:`from_bytes`
    or :meth:`from_string`.
    """

    __slots__ = ("_body", "_document", "_feed")

    def __init__(self, body: str):
        """Parse and decode ``body``.

        Args:
            body: Complete feed document text.

        Raises:
            XmlParseError: When the text is not well-formed XML, or uses
                entity declarations or external references.
            XmlDecodeError: When the XML does not match the feed schema.
        """
        try:
            document = safe_fromstring(body)
        except ParseError as e:
            line, column = getattr(e, "position", (None, None))
            raise XmlParseError(str(e), line=line, column=column) from e
        except DefusedXmlException as e:
            raise XmlParseError(f"forbidden construct: {e}") from e

        feed = decode_feed(document)

        self._body = body
        self._document: Element = document
        self._feed = feed

    @classmethod
    def from_bytes(cls, raw: bytes) -> "RssResponse":
        """Build a response from raw body bytes.

        The bytes must be UTF-8; a leading byte order mark is skipped.

        Raises:
            EncodingError: When the bytes are not valid UTF-8.
            XmlParseError: See :meth:`__init__`.
            XmlDecodeError: See :meth:`__init__`.
        """
        try:
            body = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise EncodingError(str(e)) from e
        return cls(body)

    @classmethod
    def from_string(cls, body: str) -> "RssResponse":
        """Build a response from already-decoded text."""
        return cls(body)

    @property
    def feed(self) -> Feed:
        """The decoded feed, valid for as long as this response is kept."""
        return self._feed

    def __repr__(self) -> str:
        channel = self._feed.channel
        return f"<RssResponse title={channel.title!r} items={len(channel.items)}>"
