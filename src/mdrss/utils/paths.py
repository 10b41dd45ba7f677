"""Path utilities for mdrss."""

import os
from pathlib import Path
from typing import Optional, Union


CONFIG_FILE_NAME = "mdrss.yaml"
MARKDOWN_SUFFIX = ".md"


def is_markdown_file(path: Union[str, Path]) -> bool:
    """
    Check whether a path names a markdown source file.

    The extension check is case-sensitive, so ``post.MD`` does not qualify.
    Symlinks pointing at regular files are accepted.

    Args:
        path: Filesystem path to check

    Returns:
        True if the path ends with ``.md`` and is a regular file
    """
    return str(path).endswith(MARKDOWN_SUFFIX) and os.path.isfile(path)


def get_config_file_path(directory: Optional[Path] = None) -> Optional[Path]:
    """
    Get the default configuration file path if one exists.

    Args:
        directory: Directory to look in. Defaults to the working directory.

    Returns:
        Path to ``mdrss.yaml`` or None when there is no such file
    """
    if directory is None:
        directory = Path.cwd()

    config_path = directory / CONFIG_FILE_NAME
    if config_path.is_file():
        return config_path

    return None


def resolve_path(config_file: Path, target: Union[str, Path]) -> Path:
    """Resolve a path relative to the config file's directory unless it is absolute."""
    target_path = Path(target).expanduser()
    if target_path.is_absolute():
        return target_path
    return (config_file.parent / target_path).resolve()
