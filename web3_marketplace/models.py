"""Data models for on-chain listings and marketplace API payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MarketItem:
    """Listing as stored by the marketplace contract (``MarketplaceV2.MarketItem``)."""

    nft_contract: str
    token_id: int
    seller: str
    price: int
    deadline: int

    @classmethod
    def from_tuple(cls, raw: Sequence[Any]) -> MarketItem:
        """Build from the ``(nftContract, tokenId, seller, price, deadline)`` struct tuple."""
        nft_contract, token_id, seller, price, deadline = raw
        return cls(
            nft_contract=nft_contract,
            token_id=int(token_id),
            seller=seller,
            price=int(price),
            deadline=int(deadline),
        )


@dataclass
class TokenMetadata:
    image: str = ""
    name: str = ""
    token_type: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> TokenMetadata:
        payload = payload or {}
        return cls(
            image=str(payload.get("image", "")),
            name=str(payload.get("name", "")),
            token_type=str(payload.get("tokenType", "")),
        )


@dataclass
class Token:
    token_id: str
    token_type: str
    contract_address: str
    uri: str
    metadata: TokenMetadata = field(default_factory=TokenMetadata)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> Token:
        payload = payload or {}
        return cls(
            token_id=str(payload.get("token_id", "")),
            token_type=str(payload.get("token_type", "")),
            contract_address=str(payload.get("contract_address", "")),
            uri=str(payload.get("uri", "")),
            metadata=TokenMetadata.from_payload(payload.get("metadata")),
        )


@dataclass
class CollectionToken(Token):
    project_id: str = ""
    chain_id: int = 0
    collection_id: str = ""
    supply: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> CollectionToken:
        payload = payload or {}
        token = Token.from_payload(payload)
        return cls(
            token_id=token.token_id,
            token_type=token.token_type,
            contract_address=token.contract_address,
            uri=token.uri,
            metadata=token.metadata,
            project_id=str(payload.get("project_id", "")),
            chain_id=int(payload.get("chain_id") or 0),
            collection_id=str(payload.get("collection_id", "")),
            supply=str(payload.get("supply", "")),
        )


@dataclass
class MarketplaceItem:
    """Listing as indexed by the marketplace API."""

    id: str
    chain_id: int
    project_id: str
    marketplace_id: str
    token: Token
    marketplace_contract_address: str
    seller: str
    buyer: str
    deadline: int
    price: str
    status: str
    listed_at: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MarketplaceItem:
        return cls(
            id=str(payload.get("id", "")),
            chain_id=int(payload.get("chain_id") or 0),
            project_id=str(payload.get("project_id", "")),
            marketplace_id=str(payload.get("marketplace_id", "")),
            token=Token.from_payload(payload.get("token")),
            marketplace_contract_address=str(payload.get("marketplace_contract_address", "")),
            seller=str(payload.get("seller", "")),
            buyer=str(payload.get("buyer") or ""),
            deadline=int(payload.get("deadline") or 0),
            price=str(payload.get("price", "")),
            status=str(payload.get("status", "")),
            listed_at=int(payload.get("listed_at") or 0),
        )


@dataclass
class Owner:
    owner: str
    supply: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Owner:
        return cls(owner=str(payload.get("owner", "")), supply=str(payload.get("supply", "")))


@dataclass
class Page:
    """Pagination envelope shared by list endpoints."""

    page_number: int = 0
    page_size: int = 0
    total: int = 0
    cursor: str = ""

    @staticmethod
    def _envelope(payload: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "page_number": int(payload.get("page_number") or 0),
            "page_size": int(payload.get("page_size") or 0),
            "total": int(payload.get("total") or 0),
            "cursor": str(payload.get("cursor") or ""),
        }


@dataclass
class MarketplaceItemsResult(Page):
    items: list[MarketplaceItem] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MarketplaceItemsResult:
        items = [MarketplaceItem.from_payload(item) for item in payload.get("items") or []]
        return cls(items=items, **cls._envelope(payload))


@dataclass
class TokenOwnersResult(Page):
    owners: list[Owner] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> TokenOwnersResult:
        owners = [Owner.from_payload(owner) for owner in payload.get("owners") or []]
        return cls(owners=owners, **cls._envelope(payload))
