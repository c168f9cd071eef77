"""Core module - configuration, exceptions, and utilities."""

from .config import CollectorConfig, parse_duration
from .exceptions import (
    CollectorError,
    ConfigError,
    DownloadError,
    ParseError,
    PublishError,
)
from .utils import (
    escape_label_value,
    merge_organization,
    normalize_oui,
    remove_file,
)

__all__ = [
    "CollectorConfig",
    "parse_duration",
    "CollectorError",
    "ConfigError",
    "DownloadError",
    "ParseError",
    "PublishError",
    "escape_label_value",
    "merge_organization",
    "normalize_oui",
    "remove_file",
]
