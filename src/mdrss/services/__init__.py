"""Service layer for mdrss."""

from .writer import FeedWriter, write_feed

__all__ = ["FeedWriter", "write_feed"]
