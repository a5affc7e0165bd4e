"""The search pipeline, wired to its registry collaborators."""

from __future__ import annotations

from regsearch.registry.ports import AuthResolver, IndexParser, RegistryClient
from regsearch.search.filters import filter_results, parse_filter_expr
from regsearch.search.models import SearchResult
from regsearch.search.ranking import rank_by_stars


class SearchService:
    """Runs one search: index info, auth, registry call, rank, filter."""

    def __init__(
        self,
        index_parser: IndexParser,
        auth_resolver: AuthResolver,
        client: RegistryClient,
    ) -> None:
        self.index_parser = index_parser
        self.auth_resolver = auth_resolver
        self.client = client

    def search(self, term: str, filter_expr: str = "") -> list[SearchResult]:
        """Return the ranked results for *term* that pass *filter_expr*.

        Errors from the collaborators propagate unchanged.
        """
        predicates = parse_filter_expr(filter_expr)
        index_info = self.index_parser(term)
        credential = self.auth_resolver.resolve(index_info)
        results = self.client.search(index_info, credential)
        return filter_results(rank_by_stars(results), predicates)

