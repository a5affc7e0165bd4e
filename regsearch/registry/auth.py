"""Credential lookup for registry indices.

Credentials live under ``auths`` in the config file, keyed by index name
or URL. An entry is either ``{auth: base64("user:password")}`` or
``{username: ..., password: ...}``.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from regsearch.config import Settings
from regsearch.errors import AuthResolutionError
from regsearch.registry.index import normalize_index_name
from regsearch.registry.models import Credential, IndexInfo

logger = logging.getLogger(__name__)


def decode_auth(encoded: str) -> Credential:
    """Decode a base64 ``user:password`` string."""
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise AuthResolutionError(f"Invalid base64 in auth entry: {e}") from e

    username, sep, password = decoded.partition(":")
    if not sep or not username:
        raise AuthResolutionError("Invalid auth entry: expected 'username:password'")
    return Credential(username=username, password=password)


def credential_from_entry(entry: Any) -> Credential:
    if not isinstance(entry, dict):
        raise AuthResolutionError(f"Auth entry must be a mapping, got {type(entry).__name__}")
    if entry.get("auth"):
        return decode_auth(str(entry["auth"]))
    return Credential(
        username=str(entry.get("username", "")),
        password=str(entry.get("password", "")),
    )


class ConfigAuthResolver:
    """Resolves credentials from the ``auths`` section of the settings."""

    def __init__(self, settings: Settings):
        self._auths = {normalize_index_name(key): value for key, value in settings.auths.items()}

    def resolve(self, index_info: IndexInfo) -> Credential:
        entry = self._auths.get(index_info.name)
        if entry is None:
            logger.debug("No credentials configured for %s; searching anonymously", index_info.name)
            return Credential.anonymous()

        credential = credential_from_entry(entry)
        logger.debug("Using credentials for %s as %s", index_info.name, credential.username)
        return credential
