"""Main mdrss application."""

import logging
from pathlib import Path
from typing import Union

from .config import AppConfig, FeedConfig
from .core.assembler import render_feed
from .core.collector import collect_entries
from .core.entry import EntryParseError
from .services.writer import write_feed


logger = logging.getLogger(__name__)


def generate_feed(
    markdown_dir: Union[str, Path],
    output_path: Union[str, Path],
    config: FeedConfig,
    *,
    strict: bool = False,
) -> int:
    """
    Generate an RSS feed from the markdown files under a directory.

    Files without a valid metadata block are left out of the feed. The
    output file is overwritten on every run.

    Args:
        markdown_dir: Directory searched recursively for ``*.md`` files
        output_path: Destination of the RSS document
        config: Feed-level metadata and front matter delimiter
        strict: If True, the first invalid file aborts the run

    Returns:
        Number of items written to the feed

    Raises:
        OSError: If the output file cannot be written
        EntryParseError: In strict mode, for the first invalid file
    """
    entries = collect_entries(markdown_dir, config.delimiter, strict=strict)
    document = render_feed(entries, config)
    write_feed(document, output_path)

    logger.info(f"Wrote {len(entries)} items to {output_path}")
    return len(entries)


class MdRssApp:
    """Main mdrss application."""

    def __init__(self, config: AppConfig):
        """
        Initialize the application.

        Args:
            config: Run configuration
        """
        self.config = config
        self._setup_logging()

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers = []  # Clear existing handlers
        root_logger.addHandler(console_handler)

        if self.config.log_file:
            log_file = Path(self.config.log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    def run(self, verbose: bool = False) -> int:
        """
        Generate the configured feed.

        Args:
            verbose: If True, log at DEBUG level, including skipped files

        Returns:
            Exit code (0 for success)
        """
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)
            for handler in logging.getLogger().handlers:
                handler.setLevel(logging.DEBUG)

        logger.info(
            "Generating feed from %s (strict=%s)", self.config.markdown_dir, self.config.strict
        )

        try:
            generate_feed(
                self.config.markdown_dir,
                self.config.output_path,
                self.config.feed,
                strict=self.config.strict,
            )
            return 0

        except EntryParseError as e:
            logger.error(f"Invalid markdown file: {e}")
            return 1

        except OSError as e:
            logger.error(f"Could not write feed: {e}")
            if verbose:
                logger.exception("Full traceback:")
            return 1
