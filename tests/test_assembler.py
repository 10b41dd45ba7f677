from datetime import datetime, timedelta, timezone

from mdrss.core.assembler import build_feed_document, render_feed, sort_entries
from mdrss.core.entry import FeedEntry


def make_entry(title: str, published: datetime, description: str = "Description") -> FeedEntry:
    return FeedEntry(
        title=title,
        link=f"https://example.com/{title.lower()}",
        description=description,
        author="Jane Doe",
        pub_date=published.isoformat(),
        published=published,
    )


def test_sort_entries_newest_first():
    base = datetime(2023, 1, 1, tzinfo=timezone.utc)
    entries = [make_entry(f"Post{day}", base + timedelta(days=day)) for day in (3, 10, 1, 7)]

    ordered = sort_entries(entries)

    assert [entry.title for entry in ordered] == ["Post10", "Post7", "Post3", "Post1"]


def test_sort_entries_compares_across_offsets():
    earlier = make_entry("Earlier", datetime(2023, 9, 14, 13, 0, tzinfo=timezone(timedelta(hours=2))))
    later = make_entry("Later", datetime(2023, 9, 14, 12, 0, tzinfo=timezone.utc))

    assert [entry.title for entry in sort_entries([earlier, later])] == ["Later", "Earlier"]


def test_build_feed_document_structure(feed_config):
    entry = make_entry("Hello", datetime(2024, 1, 1, tzinfo=timezone.utc))

    doc = build_feed_document([entry], feed_config)

    rss = doc.documentElement
    assert rss.tagName == "rss"
    assert rss.getAttribute("version") == "2.0"

    channel = rss.getElementsByTagName("channel")[0]
    channel_children = [node.tagName for node in channel.childNodes]
    assert channel_children == ["title", "link", "description", "item"]

    item = channel.getElementsByTagName("item")[0]
    item_children = [node.tagName for node in item.childNodes]
    assert item_children == ["title", "link", "description", "author", "pubDate"]


def test_render_feed_pretty_prints_with_cdata_description(feed_config):
    entry = make_entry("Hello", datetime(2024, 1, 1, tzinfo=timezone.utc), description="A <b>bold</b> post")

    xml = render_feed([entry], feed_config).decode("utf-8")

    assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert "\n  <channel>\n" in xml
    assert "\n    <title>Custom RSS Title</title>\n" in xml
    assert "<description>A test description.</description>" in xml
    assert "<description><![CDATA[A <b>bold</b> post]]></description>" in xml
    assert "<pubDate>2024-01-01T00:00:00+00:00</pubDate>" in xml


def test_render_feed_escapes_text_fields(feed_config):
    entry = make_entry("Tom & Jerry <3", datetime(2024, 1, 1, tzinfo=timezone.utc))

    xml = render_feed([entry], feed_config).decode("utf-8")

    assert "<title>Tom &amp; Jerry &lt;3</title>" in xml


def test_render_feed_description_with_cdata_terminator(feed_config):
    entry = make_entry("Hello", datetime(2024, 1, 1, tzinfo=timezone.utc), description="ends with ]]> here")

    xml = render_feed([entry], feed_config).decode("utf-8")

    assert "<description>ends with ]]&gt; here</description>" in xml
    assert "<![CDATA[ends with" not in xml


def test_render_feed_without_entries(feed_config):
    xml = render_feed([], feed_config).decode("utf-8")

    assert "<title>Custom RSS Title</title>" in xml
    assert "<link>https://example.com</link>" in xml
    assert "<item>" not in xml
