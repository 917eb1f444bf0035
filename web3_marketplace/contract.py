"""Bundled MarketplaceV2 ABI and contract handle helpers."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any

from web3 import Web3

MUTATING_METHODS = frozenset(
    {"listItem", "listItems", "cancelListing", "cancelExpiredListings", "purchaseItem"}
)


def load_abi() -> list[dict[str, Any]]:
    """Read the MarketplaceV2 ABI shipped with the package."""
    text = (resources.files(__package__) / "abi" / "marketplace.json").read_text("utf-8")
    return json.loads(text)


MARKETPLACE_ABI = load_abi()


def marketplace_contract(w3: Any, address: str) -> Any:
    """Return a contract handle for a deployed marketplace on ``w3``."""
    return w3.eth.contract(address=Web3.to_checksum_address(address), abi=MARKETPLACE_ABI)
