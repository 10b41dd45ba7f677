"""Configuration management for mdrss."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .utils.paths import resolve_path


logger = logging.getLogger(__name__)

FEED_KEYS = ("title", "link", "description", "delimiter")


class FeedConfig(BaseModel):
    """Feed-level metadata and the front matter delimiter."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    link: str
    description: str = ""
    delimiter: str = Field(default="---", description="Marker opening and closing each metadata block")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("Delimiter must be a non-empty string")
        return value


class AppConfig(BaseModel):
    """Configuration for a single generation run."""

    model_config = ConfigDict(extra="ignore")

    markdown_dir: Path = Path(".")
    output_path: Path = Path("rss.xml")
    feed: FeedConfig
    strict: bool = Field(default=False, description="Abort on the first file that fails to parse")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = None

    @model_validator(mode="before")
    @classmethod
    def _collect_feed_keys(cls, data: Any) -> Any:
        """Support flat configs that put title/link/description at the top level."""
        if not isinstance(data, dict):
            return data

        data = data.copy()
        feed = data.get("feed")
        if isinstance(feed, FeedConfig):
            feed = feed.model_dump()
        feed = dict(feed or {})

        for key in FEED_KEYS:
            if key in data:
                feed.setdefault(key, data.pop(key))

        data["feed"] = feed
        return data

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        """
        Return a copy with non-None overrides applied.

        Feed-level keys (title, link, description, delimiter) are routed into
        the nested feed configuration. The result is validated again.

        Args:
            **overrides: Field values to replace

        Returns:
            New AppConfig instance
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if key in FEED_KEYS:
                data["feed"][key] = value
            else:
                data[key] = value
        return AppConfig(**data)


def load_config(config_file: Path) -> AppConfig:
    """
    Load configuration from YAML file.

    Relative paths inside the file are resolved against the file's directory.

    Args:
        config_file: Path to the YAML config file

    Returns:
        AppConfig object

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")

        for key in ("markdown_dir", "output_path", "log_file"):
            if data.get(key):
                data[key] = resolve_path(config_file, data[key])

        config = AppConfig(**data)
        logger.debug("Loaded config from %s", config_file)
        return config

    except (yaml.YAMLError, ValueError) as e:
        logger.error("Error loading config from %s: %s", config_file, e)
        raise


def create_example_config() -> str:
    """Create an example configuration YAML string."""
    example: Dict[str, Any] = AppConfig(
        markdown_dir=Path("content/posts"),
        output_path=Path("public/rss.xml"),
        feed=FeedConfig(
            title="My Blog",
            link="https://example.com",
            description="Latest posts from my blog",
            delimiter="---",
        ),
    ).model_dump(mode="json")

    return yaml.dump(example, default_flow_style=False, indent=2, sort_keys=False)
