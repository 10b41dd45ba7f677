"""Core feed generation functionality."""

from .assembler import build_feed_document, render_feed, sort_entries
from .collector import collect_entries, iter_markdown_files
from .entry import EntryParseError, FeedEntry, FrontMatter, parse_entry, parse_pub_date

__all__ = [
    "EntryParseError",
    "FeedEntry",
    "FrontMatter",
    "build_feed_document",
    "collect_entries",
    "iter_markdown_files",
    "parse_entry",
    "parse_pub_date",
    "render_feed",
    "sort_entries",
]
