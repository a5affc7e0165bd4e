"""Interfaces for the registry collaborators used by the search pipeline."""

from __future__ import annotations

from typing import Protocol

from regsearch.registry.models import Credential, IndexInfo
from regsearch.search.models import SearchResult


class IndexParser(Protocol):
    def __call__(self, term: str) -> IndexInfo: ...


class AuthResolver(Protocol):
    def resolve(self, index_info: IndexInfo) -> Credential: ...


class RegistryClient(Protocol):
    def search(self, index_info: IndexInfo, credential: Credential) -> list[SearchResult]: ...
