"""Client for the marketplace REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import settings
from .errors import MarketplaceApiError
from .models import CollectionToken, MarketplaceItemsResult, TokenOwnersResult

logger = logging.getLogger(__name__)

MARKETPLACE_ITEMS_PATH = "/projects/{project_id}/marketplaces/{marketplace_id}/items"
COLLECTION_TOKEN_PATH = "/projects/{project_id}/collections/{collection_id}/tokens/{token_id}"
TOKEN_OWNERS_PATH = COLLECTION_TOKEN_PATH + "/owners"


def marketplace_items_url(base_url: str, project_id: str, marketplace_id: str) -> str:
    return base_url + MARKETPLACE_ITEMS_PATH.format(
        project_id=project_id, marketplace_id=marketplace_id
    )


def collection_token_url(base_url: str, project_id: str, collection_id: str, token_id: str) -> str:
    return base_url + COLLECTION_TOKEN_PATH.format(
        project_id=project_id, collection_id=collection_id, token_id=token_id
    )


def token_owners_url(base_url: str, project_id: str, collection_id: str, token_id: str) -> str:
    return base_url + TOKEN_OWNERS_PATH.format(
        project_id=project_id, collection_id=collection_id, token_id=token_id
    )


class MarketplaceApi:
    """Read-only queries against the marketplace indexer.

    Pass a shared ``httpx.AsyncClient`` to reuse connections; otherwise a
    transient client is opened for each request. Nothing is cached.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.client = client

    async def fetch_json(self, url: str, error_message: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Raises:
            MarketplaceApiError: if the response status is not 2xx.
        """

        logger.debug("GET %s", url)
        if self.client is not None:
            response = await self.client.get(url)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url)

        if not response.is_success:
            logger.warning("%s (%s %s)", error_message, response.status_code, url)
            raise MarketplaceApiError(
                error_message, response.reason_phrase, status_code=response.status_code
            )
        return response.json()

    async def get_marketplace_items(
        self, project_id: str, marketplace_id: str
    ) -> MarketplaceItemsResult:
        url = marketplace_items_url(self.base_url, project_id, marketplace_id)
        payload = await self.fetch_json(url, "Failed to fetch marketplace items")
        return MarketplaceItemsResult.from_payload(payload)

    async def get_collection_token(
        self, project_id: str, collection_id: str, token_id: str
    ) -> CollectionToken:
        url = collection_token_url(self.base_url, project_id, collection_id, token_id)
        payload = await self.fetch_json(url, "Failed to fetch collection token")
        return CollectionToken.from_payload(payload)

    async def get_token_owners(
        self, project_id: str, collection_id: str, token_id: str
    ) -> TokenOwnersResult:
        url = token_owners_url(self.base_url, project_id, collection_id, token_id)
        payload = await self.fetch_json(url, "Failed to fetch token owners")
        return TokenOwnersResult.from_payload(payload)
