"""Generate an RSS feed from a directory of markdown files."""

from .config import AppConfig, FeedConfig
from .core.entry import EntryParseError, FeedEntry
from .main import MdRssApp, generate_feed

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "EntryParseError",
    "FeedConfig",
    "FeedEntry",
    "MdRssApp",
    "generate_feed",
    "__version__",
]
