import logging
import textwrap
from pathlib import Path

import pytest

from mdrss.config import FeedConfig
from mdrss.main import MdRssApp


def _make_post(
    title: str = "Test Title",
    pub_date: str = "2023-09-14T12:34:56Z",
    author: str = "John Doe",
    url: str = "http://example.com",
    description: str = "A test description.",
    delimiter: str = "-rss-",
    body: str = "# Heading\n\nSome body text.\n",
) -> str:
    return textwrap.dedent(
        f"""
        {delimiter}
        title: "{title}"
        pub_date: "{pub_date}"
        author: "{author}"
        url: "{url}"
        description: "{description}"
        {delimiter}
        """
    ) + body


@pytest.fixture
def make_post():
    return _make_post


@pytest.fixture
def feed_config() -> FeedConfig:
    return FeedConfig(
        title="Custom RSS Title",
        link="https://example.com",
        description="A test description.",
        delimiter="-rss-",
    )


@pytest.fixture
def write_post(tmp_path):
    """Write a markdown file under tmp_path/posts and return its path."""
    root = tmp_path / "posts"
    root.mkdir()

    def _write(name: str, content: str) -> Path:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    _write.root = root
    return _write


@pytest.fixture
def quiet_app(monkeypatch):
    """Keep MdRssApp from replacing the root logger handlers during a test."""
    monkeypatch.setattr(MdRssApp, "_setup_logging", lambda self: None)
    root_logger = logging.getLogger()
    original_level = root_logger.level
    try:
        yield
    finally:
        root_logger.setLevel(original_level)
