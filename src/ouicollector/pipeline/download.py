"""Registry download into a temporary file."""

import logging
import os
import tempfile
import time
from http.client import HTTPException
from urllib.error import URLError
from urllib.request import Request, urlopen

from ..core.config import CollectorConfig
from ..core.exceptions import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def update(config: CollectorConfig) -> str:
    """
    Download the OUI registry CSV to a new temporary file.

    Args:
        config: Collector configuration (registry URL, timeout, user agent)

    Returns:
        Path to the temporary file holding the registry

    Raises:
        DownloadError: If the temporary file cannot be created, the request
            fails, or the body cannot be written. ``DownloadError.path`` holds
            the temporary file when it was created so the caller can remove it.
    """
    deadline = time.monotonic() + config.timeout

    try:
        fd, filename = tempfile.mkstemp(suffix="oui.csv")
    except OSError as e:
        raise DownloadError("Error creating temporary file", str(e)) from e

    with os.fdopen(fd, "wb") as f:
        try:
            request = Request(config.registry_url, headers={"User-Agent": config.user_agent})
        except ValueError as e:
            raise DownloadError("Error creating http request", str(e), path=filename) from e

        logger.debug("Fetching %s into %s", config.registry_url, filename)

        try:
            resp = urlopen(request, timeout=config.timeout)
        except (URLError, HTTPException, OSError, ValueError) as e:
            raise DownloadError("Error doing http request", str(e), path=filename) from e

        with resp:
            try:
                while True:
                    # Total bound on the transfer; the socket timeout only bounds each read
                    if time.monotonic() > deadline:
                        raise DownloadError(
                            "Error writing to temporary file", "timed out", path=filename
                        )
                    chunk = resp.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    f.write(chunk)
            except (HTTPException, OSError) as e:
                raise DownloadError(
                    "Error writing to temporary file", str(e), path=filename
                ) from e

    return filename
