#!/usr/bin/env python3
"""
Up API Client

Read-only client for the Up banking API. Authenticates with a personal access
token and follows the API's opaque "links.next" pagination cursors.
"""

import logging
from collections.abc import Iterator
from typing import Any

import requests

from ..core.config import UpConfig
from .models import UpAccount

logger = logging.getLogger(__name__)


class UpClient:
    """
    Thin wrapper around a requests.Session for the Up API.

    Every request carries the bearer token; HTTP error statuses raise
    requests.HTTPError.
    """

    def __init__(self, config: UpConfig, session: requests.Session | None = None):
        """Initialize with Up configuration and an optional pre-built session."""
        if not config.api_key:
            raise ValueError("Up API key is required")

        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {config.api_key}"})

    def _get(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET a URL and return the decoded JSON document."""
        logger.debug(f"GET {url}")
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def _iter_pages(
        self, url: str, params: dict[str, Any] | None = None
    ) -> Iterator[tuple[list[dict[str, Any]], bool]]:
        """
        Yield the "data" array of each page and whether a next link follows.

        Query params only apply to the first request; next links already
        carry the cursor and page size.
        """
        next_url: str | None = url
        while next_url:
            document = self._get(next_url, params=params)
            params = None
            next_url = (document.get("links") or {}).get("next")
            yield document.get("data", []), bool(next_url)

    def list_accounts(self) -> list[UpAccount]:
        """
        List every account visible to the token.

        Returns:
            List of UpAccount models
        """
        accounts: list[UpAccount] = []
        for page, _ in self._iter_pages(f"{self.config.base_url}/accounts"):
            accounts.extend(UpAccount.from_dict(item) for item in page)

        logger.info(f"Found {len(accounts)} Up accounts")
        return accounts

    def iter_transaction_pages(self, account_id: str) -> Iterator[tuple[list[dict[str, Any]], bool]]:
        """
        Yield (page, has_more) pairs of raw transaction resources for one account.

        Pages are fetched lazily, so a caller that stops iterating stops
        paginating.
        """
        url = f"{self.config.base_url}/accounts/{account_id}/transactions"
        yield from self._iter_pages(url, params={"page[size]": self.config.page_size})

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "UpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
