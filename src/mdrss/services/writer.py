"""Feed file writer for mdrss."""

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)


class FeedWriter:
    """Writes a rendered feed document to its destination."""

    def __init__(self, output_path: Union[str, Path]) -> None:
        """
        Initialize the feed writer.

        Args:
            output_path: Destination file, created or truncated on write
        """
        self.output_path = Path(output_path)

    def write(self, document: bytes) -> None:
        """
        Write the complete document in one pass.

        No temporary file is used, so a failure part-way may leave a
        truncated file behind.

        Args:
            document: Encoded XML document

        Raises:
            OSError: If the file cannot be created or written
        """
        try:
            with open(self.output_path, "wb") as f:
                f.write(document)
        except OSError as e:
            logger.error(f"Failed to write feed to {self.output_path}: {e}")
            raise

        logger.debug("Wrote %d bytes to %s", len(document), self.output_path)


def write_feed(document: bytes, output_path: Union[str, Path]) -> None:
    """Write a rendered feed to ``output_path``."""
    FeedWriter(output_path).write(document)
