"""Parsing of the IEEE OUI registry CSV."""

import csv
import logging
from pathlib import Path

from ..core.exceptions import ParseError
from ..core.utils import merge_organization, normalize_oui

logger = logging.getLogger(__name__)

# Registry columns: Registry, Assignment, Organization Name, Organization Address
PREFIX_COLUMN = 1
ORGANIZATION_COLUMN = 2


def read_registry(filename: str | Path) -> dict[str, str]:
    """
    Read a registry CSV into an OUI map.

    The header row is skipped. Rows whose prefix is not six characters long
    are logged and skipped. Organizations sharing a prefix are joined with
    ``" | "`` in the order they appear.

    Args:
        filename: Path to the downloaded registry CSV

    Returns:
        Mapping of ``xx:xx:xx`` prefix to organization name

    Raises:
        ParseError: If the file cannot be read or is not valid CSV
    """
    oui_map: dict[str, str] = {}

    try:
        with open(filename, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            header = next((row for row in reader if row), None)
            if header is None:
                return oui_map

            for entry in reader:
                if not entry:
                    continue

                if len(entry) != len(header):
                    raise ParseError(
                        "Error parsing OUI CSV file",
                        f"line {reader.line_num}: wrong number of fields "
                        f"(expected {len(header)}, got {len(entry)})",
                    )
                if len(entry) <= ORGANIZATION_COLUMN:
                    raise ParseError(
                        "Error parsing OUI CSV file",
                        f"line {reader.line_num}: missing organization column",
                    )

                prefix = entry[PREFIX_COLUMN]
                oui = normalize_oui(prefix)
                if oui is None:
                    logger.error("OUI has wrong number of characters: %s", prefix.lower())
                    continue

                merge_organization(oui_map, oui, entry[ORGANIZATION_COLUMN].strip())
    except csv.Error as e:
        raise ParseError("Error parsing OUI CSV file", str(e)) from e
    except UnicodeDecodeError as e:
        raise ParseError("Error decoding OUI CSV file", str(e)) from e
    except OSError as e:
        raise ParseError("Error opening OUI CSV file", str(e)) from e

    logger.debug("Parsed %d OUIs from %s", len(oui_map), filename)
    return oui_map
