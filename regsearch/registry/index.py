"""Parsing of search terms into registry index information.

``nginx`` and ``library/nginx`` search the official index, while
``registry.example.com/nginx`` or ``localhost:5000/nginx`` search the
index named by the first path component.
"""

from __future__ import annotations

import logging

from regsearch.errors import IndexParseError
from regsearch.registry.models import OFFICIAL_INDEX_NAME, IndexInfo

logger = logging.getLogger(__name__)

_LEGACY_OFFICIAL_NAMES = ("index.docker.io",)


def normalize_index_name(name: str) -> str:
    """Reduce an index name or URL to its bare host[:port] form.

    ``https://index.docker.io/v1/`` and ``index.docker.io`` both become
    ``docker.io``.
    """
    if "://" in name:
        name = name.split("://", 1)[1]
    name = name.split("/", 1)[0]
    if name in _LEGACY_OFFICIAL_NAMES:
        return OFFICIAL_INDEX_NAME
    return name


def validate_index_name(name: str) -> str:
    name = normalize_index_name(name)
    if name.startswith("-") or name.endswith("-"):
        raise IndexParseError(
            f"Invalid index name ({name}). Cannot begin or end with a hyphen."
        )
    return name


def _split_term(term: str) -> tuple[str, str]:
    first, sep, rest = term.partition("/")
    if sep and ("." in first or ":" in first or first == "localhost"):
        return first, rest
    return OFFICIAL_INDEX_NAME, term


def parse_search_index_info(term: str) -> IndexInfo:
    """Work out which index *term* targets and what to search for there."""
    if not term or not term.strip():
        raise IndexParseError("Search term must not be empty")

    index_name, remote_term = _split_term(term)
    index_name = validate_index_name(index_name)
    if not remote_term:
        raise IndexParseError(f"Search term {term!r} has no name after the index")

    info = IndexInfo(
        name=index_name,
        remote_term=remote_term,
        official=index_name == OFFICIAL_INDEX_NAME,
    )
    logger.debug("Search term %r targets index %s", term, info.name)
    return info
