"""Decode every sample feed under tests/examples."""

from pathlib import Path

import pytest

from rsst.client.response import RssResponse
from rsst.models.feed import ContentMedium

EXAMPLES_DIR = Path(__file__).parent / "examples"


@pytest.mark.parametrize("path", sorted(EXAMPLES_DIR.glob("*.xml")), ids=lambda p: p.name)
def test_parse_examples(path):
    """Test that each sample feed decodes."""
    response = RssResponse.from_bytes(path.read_bytes())

    assert response.feed.channel.title
    assert response.feed.channel.link


def test_podcast_example():
    """Test the podcast sample, which mixes in iTunes and Atom elements."""
    feed = RssResponse.from_bytes((EXAMPLES_DIR / "podcast.xml").read_bytes()).feed

    episode = feed.channel.items[0]
    assert episode.enclosure.length == 48213456
    assert [media.medium for media in episode.media] == [
        ContentMedium.IMAGE,
        ContentMedium.AUDIO,
        ContentMedium.DOCUMENT,
    ]
    assert episode.content.startswith("<p>Links:</p>")
    assert feed.channel.items[1].enclosure.length == 0


def test_news_example():
    """Test the news sample with entities, non-ASCII text and mixed date styles."""
    feed = RssResponse.from_bytes((EXAMPLES_DIR / "news.xml").read_bytes()).feed

    assert feed.channel.title == "Example News & Views"
    assert feed.channel.language == "fr-FR"
    titles = [item.title for item in feed.channel.items]
    assert titles == ["Élections : les résultats", "Weather warning issued", "Markets open flat"]
    assert feed.channel.items[0].description == "<p>Les résultats complets du scrutin.</p>"
    assert feed.channel.items[0].author is None
    assert feed.channel.items[1].pub_date.second == 0
