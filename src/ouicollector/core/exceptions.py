"""Custom exceptions for the OUI textfile collector."""


class CollectorError(Exception):
    """Base exception for all collector errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DownloadError(CollectorError):
    """Error fetching the registry into a temporary file.

    ``path`` is the temporary file that was created before the failure, or
    ``None`` if the file itself could not be created.
    """

    def __init__(self, message: str, details: str | None = None, path: str | None = None):
        super().__init__(message, details)
        self.path = path


class ParseError(CollectorError):
    """Structurally malformed registry, or I/O failure on a data file."""

    pass


class PublishError(CollectorError):
    """Atomic replacement of the output file failed."""

    pass


class ConfigError(CollectorError):
    """Invalid startup configuration."""

    pass
