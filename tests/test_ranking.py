"""Tests for star ranking."""

from regsearch.search.filters import filter_results, parse_filter_expr
from regsearch.search.models import SearchResult
from regsearch.search.ranking import rank_by_stars


def test_rank_descending_by_stars():
    results = [
        SearchResult(name="a", star_count=5),
        SearchResult(name="b", star_count=10),
        SearchResult(name="c", star_count=0),
    ]
    ranked = rank_by_stars(results)
    assert [r.name for r in ranked] == ["b", "a", "c"]
    assert [r.name for r in results] == ["a", "b", "c"]


def test_rank_is_stable_for_equal_stars():
    results = [
        SearchResult(name="first", star_count=3),
        SearchResult(name="big", star_count=9),
        SearchResult(name="second", star_count=3),
        SearchResult(name="third", star_count=3),
    ]
    ranked = rank_by_stars(results)
    assert [r.name for r in ranked] == ["big", "first", "second", "third"]


def test_rank_empty():
    assert rank_by_stars([]) == []


def test_rank_then_filter_official():
    results = [
        SearchResult(name="a", star_count=5),
        SearchResult(name="b", star_count=10, is_official=True),
    ]
    ranked = rank_by_stars(results)
    assert [r.name for r in ranked] == ["b", "a"]

    kept = filter_results(ranked, parse_filter_expr("is-official=true"))
    assert [r.name for r in kept] == ["b"]


def test_rank_then_filter_stars():
    results = [
        SearchResult(name="a", star_count=5),
        SearchResult(name="b", star_count=10, is_official=True),
    ]
    kept = filter_results(rank_by_stars(results), parse_filter_expr("has-stars=7"))
    assert [r.name for r in kept] == ["b"]
