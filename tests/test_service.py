"""Tests for the search pipeline."""

import pytest

from regsearch.errors import AuthResolutionError, IndexParseError, RegistrySearchError
from regsearch.registry.index import parse_search_index_info
from regsearch.registry.models import Credential
from regsearch.search.service import SearchService
from regsearch.search.table import render_table
from tests.fakes import FakeAuthResolver, FakeRegistryClient, make_service, sample_results


def test_search_ranks_results():
    service, _ = make_service(sample_results())
    assert [r.name for r in service.search("img")] == ["b", "a"]


def test_search_official_filter():
    service, _ = make_service(sample_results())
    assert [r.name for r in service.search("img", "is-official=true")] == ["b"]


def test_search_star_filter():
    service, _ = make_service(sample_results())
    assert [r.name for r in service.search("img", "has-stars=7")] == ["b"]


def test_search_passes_index_and_credential():
    client = FakeRegistryClient(sample_results())
    credential = Credential(username="u", password="p")
    service = SearchService(parse_search_index_info, FakeAuthResolver(credential), client)

    service.search("localhost:5000/img")

    index_info, sent = client.calls[0]
    assert index_info.name == "localhost:5000"
    assert index_info.remote_term == "img"
    assert sent == credential


def test_search_results_render_as_table():
    service, _ = make_service(sample_results())
    lines = render_table(service.search("img")).splitlines()
    assert lines[0].startswith("NAME")
    assert lines[1].startswith("b ")
    assert lines[2].startswith("a ")


def test_index_error_stops_before_registry_call():
    service, client = make_service(sample_results())
    with pytest.raises(IndexParseError):
        service.search("-bad-.com/img")
    assert client.calls == []


def test_auth_error_propagates():
    service, client = make_service(sample_results(), auth_error=AuthResolutionError("bad auth"))
    with pytest.raises(AuthResolutionError):
        service.search("img")
    assert client.calls == []


def test_registry_error_propagates():
    service, _ = make_service(client_error=RegistrySearchError("down", status_code=503))
    with pytest.raises(RegistrySearchError) as excinfo:
        service.search("img")
    assert excinfo.value.status_code == 503
