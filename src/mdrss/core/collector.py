"""Markdown file discovery."""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .entry import EntryParseError, FeedEntry, parse_entry
from ..utils.paths import is_markdown_file


logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable path %s: %s", error.filename, error)


def iter_markdown_files(root: Union[str, Path]) -> Iterator[Path]:
    """
    Walk a directory tree and yield every markdown file in it.

    Traversal errors (permission denied, broken links, missing root) are
    skipped rather than raised.

    Args:
        root: Directory to search recursively

    Yields:
        Paths of regular files whose name ends in ``.md``
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_markdown_file(path):
                yield path


def read_entry(path: Path, delimiter: str, strict: bool = False) -> Optional[FeedEntry]:
    """
    Read one markdown file and parse it into a feed entry.

    Args:
        path: Markdown file to read
        delimiter: Front matter delimiter
        strict: If True, raise on unreadable or invalid files

    Returns:
        FeedEntry or None if the file was skipped
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise EntryParseError(f"{path}: cannot read file: {e}") from e
        logger.debug("Skipping %s: cannot read file: %s", path, e)
        return None

    return parse_entry(text, delimiter, source=str(path), strict=strict)


def collect_entries(root: Union[str, Path], delimiter: str, strict: bool = False) -> List[FeedEntry]:
    """
    Collect feed entries from all markdown files under a directory.

    Args:
        root: Directory containing markdown files
        delimiter: Front matter delimiter
        strict: If True, abort on the first file that fails to parse

    Returns:
        Entries in traversal order
    """
    entries: List[FeedEntry] = []
    files_seen = 0

    for path in iter_markdown_files(root):
        files_seen += 1
        entry = read_entry(path, delimiter, strict=strict)
        if entry is not None:
            entries.append(entry)

    logger.info(f"Found {files_seen} markdown files in {root}, {len(entries)} with valid front matter")
    return entries
