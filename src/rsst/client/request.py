"""Feed request with manual redirect resolution.

Redirects are followed here rather than by httpx so the hop limit and the
way relative ``Location`` values are resolved are fixed regardless of how
the caller's client is configured.
"""

import httpx

from rsst.client.response import RssResponse
from rsst.config.settings import get_settings
from rsst.exceptions import (
    InvalidUriError,
    RssError,
    TooManyRedirectsError,
    TransportError,
    UnexpectedResponseError,
    UnresolvableRedirectError,
)
from rsst.utils.http_client import create_http_client
from rsst.utils.logger import get_logger


def parse_uri(uri: str) -> httpx.URL:
    """Parse an absolute request URI.

    Raises:
        InvalidUriError: If the URI cannot be parsed or lacks a scheme or host.
    """
    try:
        url = httpx.URL(uri)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUriError(str(uri), str(e)) from e
    if not url.scheme or not url.host:
        raise InvalidUriError(uri, "URI must be absolute (scheme and host required)")
    return url


def resolve_redirect(current: httpx.URL, status_code: int, location: str | None) -> httpx.URL:
    """Resolve a redirect target against the URL that was just requested.

    Only missing components are inherited: a ``Location`` without scheme
    takes the scheme of ``current``, one without authority takes its
    authority. Path and query always come from ``Location`` unchanged
    (no relative path merging).

    Args:
        current: URL of the request that produced the redirect.
        status_code: Status of the redirect response, for error reporting.
        location: Raw ``Location`` header value, or None if absent.

    Returns:
        The absolute URL to request next.

    Raises:
        UnresolvableRedirectError: If ``location`` is missing, empty or
            cannot be turned into an absolute URL.
    """
    if location is None or not location.strip():
        raise UnresolvableRedirectError(status_code, location)

    try:
        target = httpx.URL(location.strip())
        missing: dict = {}
        if not target.scheme:
            missing["scheme"] = current.scheme
        if not target.host:
            missing["netloc"] = current.netloc
            if current.userinfo:
                missing["userinfo"] = current.userinfo
        if missing:
            target = target.copy_with(**missing)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise UnresolvableRedirectError(status_code, location) from e

    if not target.scheme or not target.host:
        raise UnresolvableRedirectError(status_code, location)
    return target


class RssRequest:
    """GET request for an RSS feed.

    Follows up to ``max_redirects`` 3xx responses, then decodes the final
    2xx body into an :class:`RssResponse`. Nothing is retried.
    """

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient | None = None,
        max_redirects: int | None = None,
    ):
        """Initialize a feed request.

        Args:
            url: Absolute feed URL.
            client: Optional shared client. It is never closed here and may
                be used by other requests concurrently. When omitted, a
                client is created for the duration of :meth:`exec`.
            max_redirects: Redirect hops to follow. Defaults to
                ``get_settings().max_redirects``.

        Raises:
            InvalidUriError: If ``url`` is not an absolute URI.
        """
        self._url = parse_uri(url)
        self._client = client
        if max_redirects is None:
            max_redirects = get_settings().max_redirects
        self._max_redirects = max_redirects

    @property
    def url(self) -> str:
        """Initial request URL."""
        return str(self._url)

    async def exec(self) -> RssResponse:
        """Fetch and decode the feed.

        Returns:
            The decoded response.

        Raises:
            TransportError: On connection, timeout or protocol failure.
            UnexpectedResponseError: On a non-2xx, non-3xx status, or a 3xx
                whose Location cannot be resolved (UnresolvableRedirectError).
            TooManyRedirectsError: When more than ``max_redirects`` 3xx
                responses arrive in a row.
            EncodingError: When the final body is not UTF-8.
            XmlParseError: When the final body is not well-formed XML.
            XmlDecodeError: When the XML does not match the feed schema.
        """
        if self._client is not None:
            return await self._exec(self._client)

        async with create_http_client() as client:
            return await self._exec(client)

    async def _exec(self, client: httpx.AsyncClient) -> RssResponse:
        log = get_logger(__name__).bind(url=str(self._url))
        url = self._url
        hops = 0

        while True:
            try:
                response = await client.send(
                    client.build_request("GET", url),
                    stream=True,
                    follow_redirects=False,
                )
            except httpx.HTTPError as e:
                log.warning("Feed request failed", target=str(url), error=str(e))
                raise TransportError(str(e) or type(e).__name__) from e

            try:
                status_code = response.status_code
                if 200 <= status_code < 300:
                    try:
                        body = await response.aread()
                    except httpx.HTTPError as e:
                        log.warning("Reading feed body failed", target=str(url), error=str(e))
                        raise TransportError(str(e) or type(e).__name__) from e
                    break

                if 300 <= status_code < 400:
                    if hops >= self._max_redirects:
                        log.warning("Redirect limit reached", hops=hops, status_code=status_code)
                        raise TooManyRedirectsError(self._max_redirects)
                    try:
                        url = resolve_redirect(url, status_code, response.headers.get("Location"))
                    except UnresolvableRedirectError as e:
                        log.warning("Redirect not followed", status_code=status_code, error=str(e))
                        raise
                    hops += 1
                    log.debug("Following redirect", hop=hops, status_code=status_code, target=str(url))
                    continue

                log.warning("Unexpected feed response", target=str(url), status_code=status_code)
                raise UnexpectedResponseError(status_code)
            finally:
                await response.aclose()

        try:
            feed_response = RssResponse.from_bytes(body)
        except RssError as e:
            log.warning("Feed decode failed", target=str(url), error=str(e))
            raise

        log.info(
            "Feed fetched",
            target=str(url),
            hops=hops,
            item_count=len(feed_response.feed.channel.items),
        )
        return feed_response


async def fetch_feed(
    url: str,
    client: httpx.AsyncClient | None = None,
    max_redirects: int | None = None,
) -> RssResponse:
    """Fetch and decode the feed at ``url``.

    Shortcut for ``await RssRequest(url, client, max_redirects).exec()``.
    """
    return await RssRequest(url, client=client, max_redirects=max_redirects).exec()
