"""RSS 2.0 document assembly."""

from typing import Iterable, List
from xml.dom.minidom import Document, Element

from .entry import FeedEntry
from ..config import FeedConfig


RSS_VERSION = "2.0"
CDATA_END = "]]>"


def sort_entries(entries: Iterable[FeedEntry]) -> List[FeedEntry]:
    """Order entries by publication time, newest first."""
    return sorted(entries, key=lambda entry: entry.published, reverse=True)


def _text_element(doc: Document, tag: str, text: str) -> Element:
    element = doc.createElement(tag)
    element.appendChild(doc.createTextNode(text))
    return element


def _cdata_element(doc: Document, tag: str, text: str) -> Element:
    # CDATA cannot contain its own terminator; fall back to escaped text
    if CDATA_END in text:
        return _text_element(doc, tag, text)

    element = doc.createElement(tag)
    element.appendChild(doc.createCDATASection(text))
    return element


def _item_element(doc: Document, entry: FeedEntry) -> Element:
    item = doc.createElement("item")
    item.appendChild(_text_element(doc, "title", entry.title))
    item.appendChild(_text_element(doc, "link", entry.link))
    item.appendChild(_cdata_element(doc, "description", entry.description))
    item.appendChild(_text_element(doc, "author", entry.author))
    item.appendChild(_text_element(doc, "pubDate", entry.pub_date))
    return item


def build_feed_document(entries: Iterable[FeedEntry], config: FeedConfig) -> Document:
    """
    Build an RSS 2.0 DOM for the given entries.

    Entries are written in the order given; call ``sort_entries`` first.
    Item dates use each entry's original ``pub_date`` string.

    Args:
        entries: Parsed feed entries
        config: Feed-level title, link and description

    Returns:
        minidom Document rooted at ``<rss>``
    """
    doc = Document()

    rss = doc.createElement("rss")
    rss.setAttribute("version", RSS_VERSION)

    channel = doc.createElement("channel")
    channel.appendChild(_text_element(doc, "title", config.title))
    channel.appendChild(_text_element(doc, "link", config.link))
    channel.appendChild(_text_element(doc, "description", config.description))

    for entry in entries:
        channel.appendChild(_item_element(doc, entry))

    rss.appendChild(channel)
    doc.appendChild(rss)
    return doc


def render_feed(entries: Iterable[FeedEntry], config: FeedConfig) -> bytes:
    """
    Sort entries and serialize the feed as pretty-printed UTF-8 XML.

    Args:
        entries: Parsed feed entries in any order
        config: Feed-level metadata

    Returns:
        Encoded XML document including the XML declaration
    """
    doc = build_feed_document(sort_entries(entries), config)
    return doc.toprettyxml(indent="  ", encoding="utf-8")
