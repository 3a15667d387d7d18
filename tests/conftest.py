"""Test configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

FEED_NAMESPACES = (
    'xmlns:content="http://purl.org/rss/1.0/modules/content/" '
    'xmlns:media="http://search.yahoo.com/mrss/"'
)


@pytest.fixture
def sample_rss_content():
    """Sample RSS 2.0 document with every supported field."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" {FEED_NAMESPACES}>
  <channel>
    <title>Example Podcast</title>
    <link>https://example.com/</link>
    <description>Weekly episodes</description>
    <language>en-us</language>
    <item>
      <title>Episode 2</title>
      <link>https://example.com/ep2</link>
      <description>Second episode</description>
      <author>host@example.com (Host)</author>
      <enclosure url="https://example.com/ep2.mp3" length="12345" type="audio/mpeg"/>
      <guid isPermaLink="false">ep-2</guid>
      <pubDate>Thu, 19 Dec 2024 10:30:00 +0000</pubDate>
      <content:encoded><![CDATA[<p>Show notes</p>]]></content:encoded>
      <media:content url="https://example.com/ep2.jpg" type="image/jpeg" medium="image"/>
      <media:content url="https://example.com/ep2.mp4" type="video/mp4" medium="video"/>
    </item>
    <item>
      <title>Episode 1</title>
      <guid isPermaLink="true">https://example.com/ep1</guid>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def build_feed() -> Callable[[str], str]:
    """Wrap item XML into a minimal valid feed document."""

    def _build(items_xml: str) -> str:
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" {FEED_NAMESPACES}>
  <channel>
    <title>Test Channel</title>
    <link>https://example.com/</link>
    {items_xml}
  </channel>
</rss>"""

    return _build


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    """Create an AsyncClient whose requests are answered by ``handler``."""

    def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _client
