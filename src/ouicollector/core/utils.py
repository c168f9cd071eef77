"""Utility functions for the OUI textfile collector."""

import logging
import os

logger = logging.getLogger(__name__)

OUI_LENGTH = 6
ORGANIZATION_SEPARATOR = " | "


def normalize_oui(prefix: str) -> str | None:
    """Format a registry prefix as colon-delimited lowercase hex.

    Returns ``None`` when the prefix does not have exactly six characters
    after lowercasing.
    """
    oui = prefix.lower()
    if len(oui) != OUI_LENGTH:
        return None
    return f"{oui[0:2]}:{oui[2:4]}:{oui[4:6]}"


def merge_organization(oui_map: dict[str, str], oui: str, organization: str) -> None:
    """Insert an organization, concatenating names for a repeated OUI."""
    if oui in oui_map:
        oui_map[oui] = ORGANIZATION_SEPARATOR.join([oui_map[oui], organization])
    else:
        oui_map[oui] = organization


def escape_label_value(value: str) -> str:
    """Escape double quotes in a metric label value."""
    return value.replace('"', '\\"')


def remove_file(path: str | os.PathLike[str]) -> bool:
    """Remove a file, logging instead of raising on failure."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.error("Error removing temporary file %s: %s", path, e)
        return False
    return True
