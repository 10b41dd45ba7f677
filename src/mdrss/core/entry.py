"""Front matter extraction and feed entry construction."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


logger = logging.getLogger(__name__)

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
BOOL_TAG = "tag:yaml.org,2002:bool"

# YAML 1.2 core schema booleans; yes/no/on/off stay strings
BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")

RFC3339_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt ]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class EntryParseError(ValueError):
    """Raised when a markdown file cannot be turned into a feed entry."""


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps and yes/no/on/off as the strings the author wrote."""


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (TIMESTAMP_TAG, BOOL_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_implicit_resolver(BOOL_TAG, BOOL_PATTERN, list("tTfF"))


class FrontMatter(BaseModel):
    """Metadata block of a single markdown file."""

    model_config = ConfigDict(extra="ignore", strict=True)

    title: str
    pub_date: str
    author: str
    url: str
    description: str

    @field_validator("*")
    @classmethod
    def validate_xml_chars(cls, value: str) -> str:
        if INVALID_XML_CHARS.search(value):
            raise ValueError("contains characters not allowed in XML")
        return value


@dataclass(frozen=True)
class FeedEntry:
    """A parsed markdown file ready to be rendered as a feed item."""

    title: str
    link: str
    description: str
    author: str
    pub_date: str
    published: datetime

    @classmethod
    def from_front_matter(cls, front_matter: FrontMatter, published: datetime) -> "FeedEntry":
        return cls(
            title=front_matter.title,
            link=front_matter.url,
            description=front_matter.description,
            author=front_matter.author,
            pub_date=front_matter.pub_date,
            published=published,
        )

    def __str__(self) -> str:
        return f"FeedEntry({self.title}, {self.pub_date})"


def split_front_matter(text: str, delimiter: str) -> Optional[str]:
    """
    Extract the metadata block between the first two delimiters.

    Args:
        text: Raw file content
        delimiter: Marker that opens and closes the block

    Returns:
        Text between the first and second delimiter, or None if the
        delimiter occurs fewer than two times
    """
    parts = text.split(delimiter, 2)
    if len(parts) != 3:
        return None
    return parts[1]


def decode_front_matter(block: str) -> FrontMatter:
    """
    Decode a metadata block into a FrontMatter record.

    Args:
        block: YAML text taken from between the delimiters

    Returns:
        FrontMatter with all required fields

    Raises:
        EntryParseError: If the YAML is malformed, is not a mapping, or
            lacks a required string field, or a value holds characters
            that cannot appear in XML
    """
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise EntryParseError(f"invalid front matter: {e}") from e

    if not isinstance(data, dict):
        raise EntryParseError("front matter is not a key/value mapping")

    try:
        return FrontMatter(**_string_keys(data))
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise EntryParseError(f"invalid front matter fields: {fields}") from e


def parse_pub_date(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp with an explicit UTC offset.

    Other ISO 8601 forms (basic format, week dates, reduced precision,
    offsets without a colon) are rejected.

    Args:
        value: Date string such as ``2023-09-14T12:34:56Z``

    Returns:
        Timezone-aware datetime

    Raises:
        EntryParseError: If the string is not an RFC 3339 date-time
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if match is None:
        raise EntryParseError(f"pub_date {value!r} is not an RFC 3339 timestamp")

    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"

    # datetime only keeps microseconds
    fraction = ""
    if match["fraction"]:
        fraction = "." + match["fraction"][:6].ljust(6, "0")

    try:
        return datetime.fromisoformat(f"{match['date']}T{match['time']}{fraction}{offset}")
    except ValueError as e:
        raise EntryParseError(f"invalid pub_date {value!r}") from e


def build_entry(text: str, delimiter: str) -> FeedEntry:
    """Build a feed entry from file content, raising EntryParseError on failure."""
    block = split_front_matter(text, delimiter)
    if block is None:
        raise EntryParseError(f"delimiter {delimiter!r} does not enclose a metadata block")

    front_matter = decode_front_matter(block)
    published = parse_pub_date(front_matter.pub_date)
    return FeedEntry.from_front_matter(front_matter, published)


def parse_entry(
    text: str,
    delimiter: str,
    *,
    source: Optional[str] = None,
    strict: bool = False,
) -> Optional[FeedEntry]:
    """
    Parse raw markdown text into at most one feed entry.

    Every failure (missing block, bad YAML, missing field, bad date) has the
    same outcome: no entry.

    Args:
        text: Raw file content
        delimiter: Marker that opens and closes the metadata block
        source: Optional label for log messages, usually the file path
        strict: If True, re-raise the failure instead of returning None

    Returns:
        FeedEntry, or None if the text does not describe a valid entry

    Raises:
        EntryParseError: Only in strict mode
    """
    try:
        return build_entry(text, delimiter)
    except EntryParseError as e:
        if strict:
            raise EntryParseError(f"{source}: {e}" if source else str(e)) from e
        logger.debug("Skipping %s: %s", source or "<text>", e)
        return None


def _string_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    # YAML allows non-string keys; they can never name a required field
    return {key: value for key, value in data.items() if isinstance(key, str)}
