"""Custom exceptions for rsst.

Every stage of the fetch-and-decode pipeline raises its own error kind, so
callers can tell a network failure from "not XML" from "valid XML, wrong
shape". None of them triggers an internal retry.
"""

from typing import Any


class RssError(Exception):
    """Base exception class for all rsst errors."""

    pass


class ConfigurationError(RssError):
    """Raised when RSST_ settings from the environment or .env are invalid."""

    def __init__(self, message: str):
        super().__init__(f"invalid configuration: {message}")


class TransportError(RssError):
    """Raised when the HTTP transport fails (connect, timeout, protocol).

    The underlying httpx error is available as ``__cause__``.
    """

    def __init__(self, message: str):
        super().__init__(f"http error: {message}")


class InvalidUriError(RssError):
    """Raised when a request URI cannot be parsed or is not absolute.

    Attributes:
        uri: The rejected URI as given by the caller.
    """

    def __init__(self, uri: str, message: str):
        self.uri = uri
        super().__init__(f"invalid uri {uri!r}: {message}")


class EncodingError(RssError):
    """Raised when a response body is not valid UTF-8."""

    def __init__(self, message: str):
        super().__init__(f"encoding error: {message}")


class XmlParseError(RssError):
    """Raised when the document is not well-formed (or not safe) XML.

    Attributes:
        line: 1-based line of the failure, when the parser reports one.
        column: Column of the failure, when the parser reports one.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        super().__init__(f"xml parse error: {message}")


class XmlDecodeError(RssError):
    """Raised when well-formed XML does not match the feed schema.

    Attributes:
        errors: Structured per-field failures, each a dict with ``loc``
            and ``msg`` keys.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(f"xml decode error: {message}")


class UnexpectedResponseError(RssError):
    """Raised when the server answers with a status the client cannot use.

    Attributes:
        status_code: The HTTP status code of the response.
    """

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"unexpected response code {status_code}")


class UnresolvableRedirectError(UnexpectedResponseError):
    """Raised when a 3xx response has a missing or unparsable Location.

    Still an :class:`UnexpectedResponseError` carrying the redirect status,
    so handlers for unexpected responses keep catching it.

    Attributes:
        location: Raw Location header value, or None when it was absent.
    """

    def __init__(self, status_code: int, location: str | None):
        self.location = location
        if location is None:
            detail = "missing Location header"
        else:
            detail = f"unresolvable Location {location!r}"
        super().__init__(status_code, f"unexpected response code {status_code}: {detail}")


class TooManyRedirectsError(RssError):
    """Raised when a redirect chain exceeds the configured hop limit.

    Attributes:
        max_redirects: The hop limit that was exceeded.
    """

    def __init__(self, max_redirects: int):
        self.max_redirects = max_redirects
        super().__init__(f"too many redirects (limit {max_redirects})")
