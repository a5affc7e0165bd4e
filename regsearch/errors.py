"""Exception hierarchy for regsearch.

Library code raises these; only the CLI turns them into exit codes.
"""

from __future__ import annotations


class RegSearchError(Exception):
    """Base class for all regsearch failures."""


class ConfigError(RegSearchError):
    """The configuration file could not be read or is malformed."""


class IndexParseError(RegSearchError):
    """A search term does not name a valid registry index."""


class AuthResolutionError(RegSearchError):
    """Credentials for an index exist but cannot be decoded."""


class RegistrySearchError(RegSearchError):
    """The registry search request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
