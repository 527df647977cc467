"""Registry dataset acquisition and parsing."""

from .reader import (
    IANA_REGISTRY_URL,
    DatasetError,
    MalformedRowError,
    MissingColumnsError,
    PortDescError,
    parse_records,
)
from .source import SourceUnavailableError, read_bundled_text, read_source_text

__all__ = [
    "IANA_REGISTRY_URL",
    "DatasetError",
    "MalformedRowError",
    "MissingColumnsError",
    "PortDescError",
    "SourceUnavailableError",
    "parse_records",
    "read_bundled_text",
    "read_source_text",
]
