"""Marketplace plugin attached to a web3.py ``AsyncWeb3`` instance."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx

from .accounts import resolve_sender
from .api import MarketplaceApi
from .config import settings
from .contract import marketplace_contract
from .errors import PluginNotRegisteredError, PluginRegistrationError
from .models import CollectionToken, MarketItem, MarketplaceItemsResult, TokenOwnersResult

if TYPE_CHECKING:
    from web3.contract import AsyncContract

logger = logging.getLogger(__name__)


class MarketplacePlugin:
    """Convenience calls for a MarketplaceV2 contract and its REST indexer.

    Register it on a host with :func:`register_plugin`, then call it as
    ``w3.marketplace.list_item(...)``. Mutating calls sign with the first
    provider account, falling back to the configured default account.
    Arguments are forwarded to the contract as given, so prices and deadlines
    must already be integers in wei and UNIX seconds.
    """

    namespace = "marketplace"

    def __init__(
        self,
        base_url: str | None = None,
        *,
        default_account: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.default_account = default_account or settings.default_account
        self.api = MarketplaceApi(base_url, client=http_client)
        self.w3: Any = None

    @property
    def base_url(self) -> str:
        return self.api.base_url

    def link(self, w3: Any) -> None:
        self.w3 = w3

    def _host(self) -> Any:
        if self.w3 is None:
            raise PluginNotRegisteredError(
                f"{type(self).__name__} is not registered; call register_plugin(w3, plugin) first"
            )
        return self.w3

    def _fallback_account(self) -> str | None:
        if self.default_account:
            return self.default_account
        # web3.py keeps an ``Empty`` sentinel until a default is set
        host_default = getattr(self._host().eth, "default_account", None)
        if isinstance(host_default, str) and host_default:
            return host_default
        return None

    async def get_sender(self) -> str:
        """Resolve the address that signs the next transaction."""
        accounts: Sequence[str] = await self._host().eth.accounts
        sender = resolve_sender(accounts, self._fallback_account())
        logger.debug("Resolved sender %s (%d provider accounts)", sender, len(accounts))
        return sender

    def contract(self, address: str) -> AsyncContract:
        """Marketplace contract handle on the registered host."""
        return marketplace_contract(self._host(), address)

    async def _transact(self, function: Any, label: str, value: int | None = None) -> Any:
        sender = await self.get_sender()
        tx_params: dict[str, Any] = {"from": sender}
        if value is not None:
            tx_params["value"] = value

        try:
            tx_hash = await function.transact(tx_params)
            logger.info("%s submitted from %s", label, sender)
            receipt = await self._host().eth.wait_for_transaction_receipt(tx_hash)
        except Exception as exc:
            logger.error("Error in %s: %s", label, exc)
            raise

        logger.info("%s mined in block %s", label, _receipt_field(receipt, "blockNumber"))
        return receipt

    # Mutating calls

    async def list_item(
        self, contract: AsyncContract, nft_contract: str, token_id: int, price: int, deadline: int
    ) -> Any:
        """List one NFT for sale. ``deadline`` is a UNIX timestamp, or 0 for none."""
        function = contract.functions.listItem(nft_contract, token_id, price, deadline)
        return await self._transact(function, "listItem")

    async def list_items(
        self,
        contract: AsyncContract,
        nft_contracts: Sequence[str],
        token_ids: Sequence[int],
        amounts: Sequence[int],
        prices: Sequence[int],
        deadlines: Sequence[int],
    ) -> Any:
        """List several NFTs in one transaction; the sequences are parallel."""
        function = contract.functions.listItems(nft_contracts, token_ids, amounts, prices, deadlines)
        return await self._transact(function, "listItems")

    async def cancel_listing(self, contract: AsyncContract, item_id: int) -> Any:
        """Cancel a listing and return the token to its seller."""
        return await self._transact(contract.functions.cancelListing(item_id), "cancelListing")

    async def cancel_expired_listings(self, contract: AsyncContract, item_ids: Sequence[int]) -> Any:
        function = contract.functions.cancelExpiredListings(item_ids)
        return await self._transact(function, "cancelExpiredListings")

    async def purchase_item(self, contract: AsyncContract, item_id: int, price: int) -> Any:
        """Buy a listed item, attaching ``price`` wei. It must match the listing price."""
        function = contract.functions.purchaseItem(item_id)
        return await self._transact(function, "purchaseItem", value=price)

    # Contract reads

    async def get_market_item(self, contract: AsyncContract, item_id: int) -> MarketItem:
        raw = await contract.functions.itemById(item_id).call()
        return MarketItem.from_tuple(raw)

    async def get_active_items(self, contract: AsyncContract) -> list[MarketItem]:
        raw_items = await contract.functions.activeItems().call()
        return [MarketItem.from_tuple(raw) for raw in raw_items]

    async def get_user_listings(self, contract: AsyncContract, user: str | None = None) -> list[MarketItem]:
        """Listings created by ``user``, or by the resolved sender when omitted."""
        owner = user or await self.get_sender()
        raw_items = await contract.functions.usersListings(owner).call()
        return [MarketItem.from_tuple(raw) for raw in raw_items]

    async def get_expired_listing_ids(self, contract: AsyncContract, start: int, end: int) -> list[int]:
        ids = await contract.functions.expiredListingIds(start, end).call()
        return [int(item_id) for item_id in ids]

    async def get_total_listings(self, contract: AsyncContract) -> int:
        return int(await contract.functions.totalListings().call())

    # REST reads

    async def get_marketplace_items(
        self, project_id: str, marketplace_id: str
    ) -> MarketplaceItemsResult:
        return await self.api.get_marketplace_items(project_id, marketplace_id)

    async def get_collection_token(
        self, project_id: str, collection_id: str, token_id: str
    ) -> CollectionToken:
        return await self.api.get_collection_token(project_id, collection_id, token_id)

    async def get_token_owners(
        self, project_id: str, collection_id: str, token_id: str
    ) -> TokenOwnersResult:
        return await self.api.get_token_owners(project_id, collection_id, token_id)


def _receipt_field(receipt: Any, key: str) -> Any:
    try:
        return receipt[key]
    except (KeyError, TypeError):
        return None


def register_plugin(context: Any, plugin: MarketplacePlugin) -> MarketplacePlugin:
    """Attach ``plugin`` to ``context`` under ``plugin.namespace``.

    Raises:
        PluginRegistrationError: if the context already has that attribute,
            or the plugin is already linked to a different host.
    """

    if getattr(context, plugin.namespace, None) is not None:
        raise PluginRegistrationError(
            f"{type(context).__name__} already has a '{plugin.namespace}' attribute"
        )
    if plugin.w3 is not None and plugin.w3 is not context:
        raise PluginRegistrationError(
            f"{type(plugin).__name__} is already registered on another host"
        )
    plugin.link(context)
    setattr(context, plugin.namespace, plugin)
    logger.debug("Registered %s as %r", type(plugin).__name__, plugin.namespace)
    return plugin
