"""Ordering of search results by popularity."""

from __future__ import annotations

from typing import Iterable

from regsearch.search.models import SearchResult


def rank_by_stars(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Return *results* in descending star order.

    ``sorted`` is stable, so entries with equal star counts keep the order
    the registry returned them in.
    """
    return sorted(results, key=lambda r: r.star_count, reverse=True)
