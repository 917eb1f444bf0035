"""Exceptions raised by the marketplace plugin."""

from __future__ import annotations

from typing import Any


class MarketplaceError(Exception):
    """Base marketplace plugin error."""


class UnknownAccountError(MarketplaceError):
    """Raised when no signing account can be resolved."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class MarketplaceApiError(MarketplaceError):
    """Raised when the marketplace REST API answers with a non-success status.

    ``response`` holds the HTTP status text (for example ``"Not Found"``).
    """

    def __init__(self, message: str, response: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.message}: {self.response}"

    def to_dict(self) -> dict[str, Any]:
        return {"response": self.response, "message": self.message}


class PluginRegistrationError(MarketplaceError):
    """Raised when a plugin cannot be attached to a host context."""


class PluginNotRegisteredError(MarketplaceError):
    """Raised when a contract call is made before the plugin is registered."""
