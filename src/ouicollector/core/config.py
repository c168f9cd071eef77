"""Configuration for the OUI textfile collector."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from .. import __version__
from .exceptions import ConfigError

BIN_NAME = "oui_textfile_collector"
REGISTRY_URL = "https://standards-oui.ieee.org/oui/oui.csv"

DEFAULT_OUTPUT_FILE = "/var/lib/node_exporter/textfile/oui.prom"
DEFAULT_METRIC_NAME = "mac_oui_info"
DEFAULT_REFRESH_INTERVAL = "168h"
DEFAULT_TIMEOUT = 30.0

# Seconds per duration unit
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

# Largest duration representable as signed 64-bit nanoseconds
MAX_DURATION = (2**63 - 1) / 1e9


def default_user_agent() -> str:
    return f"{BIN_NAME}/{__version__}"


def parse_duration(text: str) -> float:
    """Parse a duration string such as ``168h``, ``1h30m`` or ``1.5s``.

    Accepts a sequence of decimal numbers, each with an optional fraction and
    a unit suffix, with an optional leading sign. ``"0"`` is accepted on its
    own without a unit.

    Returns:
        Duration in seconds

    Raises:
        ConfigError: If the string is not a valid duration
    """
    original = text

    sign = 1.0
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1.0
        text = text[1:]

    if text == "0":
        return 0.0
    if not text:
        raise ConfigError(f"Invalid duration {original!r}")

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ConfigError(
                f"Invalid duration {original!r}",
                'valid time units are "ns", "us", "ms", "s", "m", "h"',
            )
        value, unit = match.groups()
        total += float(value) * _DURATION_UNITS[unit]
        pos = match.end()

    if total > MAX_DURATION:
        raise ConfigError(f"Invalid duration {original!r}", "duration out of range")

    return sign * total


@dataclass(frozen=True)
class CollectorConfig:
    """Immutable runtime configuration, built once at startup."""

    output_file: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))
    metric_name: str = DEFAULT_METRIC_NAME
    refresh_interval: float = 168 * 3600.0  # seconds
    registry_url: str = REGISTRY_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = field(default_factory=default_user_agent)

    def __post_init__(self) -> None:
        if isinstance(self.output_file, str):
            object.__setattr__(self, "output_file", Path(self.output_file))
        if self.refresh_interval <= 0:
            raise ConfigError(
                "Refresh interval must be positive",
                f"got {self.refresh_interval}s",
            )

    @property
    def tmp_output_file(self) -> Path:
        """Staging path the metrics are written to before the atomic rename."""
        return self.output_file.with_name(self.output_file.name + ".tmp")

    @classmethod
    def from_options(
        cls,
        output_file: str,
        metric_name: str,
        refresh_interval: str,
    ) -> "CollectorConfig":
        """Build configuration from raw command-line option values."""
        return cls(
            output_file=Path(output_file),
            metric_name=metric_name,
            refresh_interval=parse_duration(refresh_interval),
        )
