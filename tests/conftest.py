import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from web3_marketplace.config import settings

TX_HASH = b"\x11" * 32
SENDER = "0x1111111111111111111111111111111111111111"
DEFAULT_ACCOUNT = "0x2222222222222222222222222222222222222222"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep a developer's .env from leaking into tests."""
    monkeypatch.setattr(settings, "default_account", None)
    monkeypatch.setattr(settings, "api_url", "https://api.test/v1")


class DummyFunction:
    def __init__(self, contract: "DummyContract", name: str, args: tuple) -> None:
        self.contract = contract
        self.name = name
        self.args = args

    async def transact(self, tx_params: dict) -> bytes:
        self.contract.transactions.append((self.name, self.args, tx_params))
        if self.contract.revert:
            raise self.contract.revert
        return TX_HASH

    async def call(self):
        self.contract.calls.append((self.name, self.args))
        return self.contract.results[self.name]


class DummyFunctions:
    def __init__(self, contract: "DummyContract") -> None:
        self._contract = contract

    def __getattr__(self, name: str):
        def build(*args):
            return DummyFunction(self._contract, name, args)

        return build


class DummyContract:
    def __init__(self, results: dict | None = None, revert: Exception | None = None) -> None:
        self.results = results or {}
        self.revert = revert
        self.transactions: list[tuple] = []
        self.calls: list[tuple] = []
        self.functions = DummyFunctions(self)


class DummyEth:
    def __init__(self, accounts: list[str] | None = None, default_account=None) -> None:
        self._accounts = accounts or []
        self.default_account = default_account
        self.account_queries = 0
        self.waited_for: list[bytes] = []
        self.contracts: list[dict] = []

    @property
    async def accounts(self) -> list[str]:
        self.account_queries += 1
        return list(self._accounts)

    async def wait_for_transaction_receipt(self, tx_hash: bytes) -> dict:
        self.waited_for.append(tx_hash)
        return {"transactionHash": tx_hash, "blockNumber": 7, "status": 1}

    def contract(self, **kwargs):
        self.contracts.append(kwargs)
        return DummyContract()


class DummyWeb3:
    def __init__(self, eth: DummyEth) -> None:
        self.eth = eth
