"""Sender resolution for mutating marketplace calls."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import UnknownAccountError

NO_ACCOUNT_MESSAGE = (
    "No account found, please connect to a wallet provider or set a default account - "
    "'w3.eth.default_account = <your address>' or MARKETPLACE_DEFAULT_ACCOUNT"
)


def resolve_sender(accounts: Sequence[str], default_account: str | None = None) -> str:
    """Pick the address that signs a transaction.

    The first provider account wins; the configured default is only used when
    the provider exposes no accounts.

    Raises:
        UnknownAccountError: if neither source yields an address.
    """

    sender = accounts[0] if accounts else default_account
    if not sender:
        raise UnknownAccountError(NO_ACCOUNT_MESSAGE)
    return sender
