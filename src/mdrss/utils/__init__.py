"""Utility functions for mdrss."""

from .paths import (
    CONFIG_FILE_NAME,
    get_config_file_path,
    is_markdown_file,
    resolve_path,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "get_config_file_path",
    "is_markdown_file",
    "resolve_path",
]
