"""Filter expressions for ``regsearch search --filter``.

An expression is a space-separated list of ``key=value`` tokens, e.g.
``"is-official=true has-stars=50"``. Only three keys have an effect:

- ``is-automated=true`` keeps automated builds only
- ``is-official=true`` keeps official images only
- ``has-stars=N`` keeps results with at least N stars

Tokens whose value is not ``true``, ``false`` or digit-leading are dropped
without an error.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from regsearch.search.models import (
    HAS_STARS,
    IS_AUTOMATED,
    IS_OFFICIAL,
    FilterPredicates,
    SearchResult,
    make_predicates,
)

logger = logging.getLogger(__name__)

_ASCII_DIGITS = "0123456789"
_INTEGER_RE = re.compile(r"[0-9]+")


def _is_accepted_value(value: str) -> bool:
    if value in ("true", "false"):
        return True
    return value != "" and value[0] in _ASCII_DIGITS


def parse_filter_expr(filter_expr: str) -> FilterPredicates:
    """Parse a filter expression into predicates.

    The result always holds ``is-automated``, ``is-official`` and
    ``has-stars`` (``""`` when not given). Later tokens override earlier
    ones; unknown keys are kept but never read.
    """
    values: dict[str, str] = {}

    for token in filter_expr.split():
        if "=" not in token:
            logger.debug("Ignoring filter token without '=': %r", token)
            continue
        key, _, value = token.partition("=")
        if not _is_accepted_value(value):
            logger.debug("Ignoring filter token with unsupported value: %r", token)
            continue
        values[key] = value

    return make_predicates(values)


def star_threshold(predicates: FilterPredicates) -> int:
    """Minimum star count from ``has-stars``; 0 when missing or unparsable."""
    raw = predicates.get(HAS_STARS, "")
    if _INTEGER_RE.fullmatch(raw):
        return int(raw)
    return 0


def matches(result: SearchResult, predicates: FilterPredicates) -> bool:
    """Return True when *result* satisfies every predicate."""
    if predicates.get(IS_AUTOMATED) == "true" and not result.is_automated:
        return False
    if predicates.get(IS_OFFICIAL) == "true" and not result.is_official:
        return False
    return result.star_count >= star_threshold(predicates)


def filter_results(
    results: Iterable[SearchResult], predicates: FilterPredicates
) -> list[SearchResult]:
    """Drop results that fail the predicates, keeping the survivors' order."""
    return [result for result in results if matches(result, predicates)]
