"""Rendering and atomic publication of the OUI metric file."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..core.config import CollectorConfig
from ..core.exceptions import ParseError, PublishError
from ..core.utils import escape_label_value, remove_file
from .registry import read_registry

logger = logging.getLogger(__name__)


def render_metrics(oui_map: dict[str, str], metric_name: str) -> Iterator[str]:
    """Yield one newline-terminated metric line per OUI, in map order."""
    for oui, organization in oui_map.items():
        yield (
            f'{metric_name}{{oui="{escape_label_value(oui)}",'
            f'organization_name="{escape_label_value(organization)}"}} 1\n'
        )


def write_metrics(oui_map: dict[str, str], metric_name: str, tmp_file: Path) -> None:
    """
    Write rendered metrics to a staging file.

    Raises:
        ParseError: If the staging file cannot be opened or written
    """
    try:
        with open(tmp_file, "w", encoding="utf-8") as output:
            output.writelines(render_metrics(oui_map, metric_name))
    except OSError as e:
        remove_file(tmp_file)
        raise ParseError("Error writing to temporary OUI metric file", str(e)) from e


def publish(tmp_file: Path, output_file: Path) -> None:
    """
    Atomically replace the output file with the staging file.

    Raises:
        PublishError: If the rename fails
    """
    try:
        os.replace(tmp_file, output_file)
    except OSError as e:
        remove_file(tmp_file)
        raise PublishError("Error renaming OUI metric file", str(e)) from e


def parse(filename: str | Path, config: CollectorConfig) -> int:
    """
    Transform a downloaded registry into the published metric file.

    Args:
        filename: Path to the downloaded registry CSV
        config: Collector configuration (output file, metric name)

    Returns:
        Number of OUIs published

    Raises:
        ParseError: On read, CSV or staging write failures
        PublishError: If the staging file cannot be renamed into place
    """
    oui_map = read_registry(filename)

    write_metrics(oui_map, config.metric_name, config.tmp_output_file)
    publish(config.tmp_output_file, config.output_file)

    logger.debug("Published %d OUIs to %s", len(oui_map), config.output_file)
    return len(oui_map)
