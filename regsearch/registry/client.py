"""HTTP client for a registry's v1 search endpoint.

Sends ``GET /v1/search?q=<term>`` to the index and turns the ``results``
array of the JSON reply into :class:`SearchResult` objects. Failures are
reported as :class:`RegistrySearchError`; nothing is retried.
"""

from __future__ import annotations

import logging

import httpx

from regsearch import __version__
from regsearch.config import Settings
from regsearch.errors import RegistrySearchError
from regsearch.registry.index import normalize_index_name
from regsearch.registry.models import Credential, IndexInfo
from regsearch.search.models import SearchResult

logger = logging.getLogger(__name__)

SEARCH_PATH = "/v1/search"
USER_AGENT = f"regsearch/{__version__}"


class HttpRegistryClient:
    """Searches a registry index over HTTP(S).

    Parameters
    ----------
    settings : Settings
        Supplies the timeout, the host of the official index and the list
        of indices reached over plain HTTP.
    transport : httpx.BaseTransport | None
        Optional transport override, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._insecure = {normalize_index_name(r) for r in settings.insecure_registries}

    def search_url(self, index_info: IndexInfo) -> str:
        host = self.settings.official_index_host if index_info.official else index_info.name
        scheme = "http" if index_info.name in self._insecure else "https"
        return f"{scheme}://{host}{SEARCH_PATH}"

    def search(self, index_info: IndexInfo, credential: Credential) -> list[SearchResult]:
        """Run the search and return results in the order the registry sent them."""
        url = self.search_url(index_info)
        auth = None
        if not credential.is_anonymous:
            auth = httpx.BasicAuth(credential.username, credential.password)
        logger.debug(
            "Searching %s for %r (%s)",
            url,
            index_info.remote_term,
            "anonymous" if auth is None else "authenticated",
        )

        try:
            with httpx.Client(
                timeout=self.settings.timeout,
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                transport=self._transport,
            ) as client:
                resp = client.get(url, params={"q": index_info.remote_term}, auth=auth)
        except httpx.HTTPError as e:
            logger.warning("Search request to %s failed: %s", url, e)
            raise RegistrySearchError(f"Error searching {index_info.name}: {e}") from e

        if resp.status_code >= 400:
            logger.warning("Search request to %s returned HTTP %d", url, resp.status_code)
            raise RegistrySearchError(
                f"Error searching {index_info.name}: HTTP {resp.status_code} "
                f"{resp.reason_phrase}".rstrip(),
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise RegistrySearchError(
                f"Error searching {index_info.name}: invalid JSON in response"
            ) from e

        if not isinstance(data, dict):
            raise RegistrySearchError(
                f"Error searching {index_info.name}: unexpected response shape"
            )

        items = data.get("results")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise RegistrySearchError(
                f"Error searching {index_info.name}: 'results' is not a list"
            )

        try:
            results = [SearchResult.from_api(item) for item in items]
        except (TypeError, ValueError) as e:
            raise RegistrySearchError(
                f"Error searching {index_info.name}: malformed result: {e}"
            ) from e
        logger.info("Registry %s returned %d results", index_info.name, len(results))
        return results
