"""Async web3.py plugin for a MarketplaceV2 contract and its REST API."""

__all__ = [
    "CollectionToken",
    "MARKETPLACE_ABI",
    "MarketItem",
    "MarketplaceApi",
    "MarketplaceApiError",
    "MarketplaceError",
    "MarketplaceItem",
    "MarketplaceItemsResult",
    "MarketplacePlugin",
    "TokenOwnersResult",
    "UnknownAccountError",
    "marketplace_contract",
    "register_plugin",
    "resolve_sender",
]

from .accounts import resolve_sender
from .api import MarketplaceApi
from .contract import MARKETPLACE_ABI, marketplace_contract
from .errors import MarketplaceApiError, MarketplaceError, UnknownAccountError
from .models import (
    CollectionToken,
    MarketItem,
    MarketplaceItem,
    MarketplaceItemsResult,
    TokenOwnersResult,
)
from .plugin import MarketplacePlugin, register_plugin
