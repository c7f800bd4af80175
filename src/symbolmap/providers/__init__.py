"""Brokerage client registry."""

from __future__ import annotations

from symbolmap.config import BrokerageProviderType
from symbolmap.providers.base import BaseBrokerageClient
from symbolmap.providers.mock import MockBrokerageClient
from symbolmap.providers.tradier import TradierClient

PROVIDER_CLASSES: dict[BrokerageProviderType, type[BaseBrokerageClient]] = {
    BrokerageProviderType.TRADIER: TradierClient,
    BrokerageProviderType.MOCK: MockBrokerageClient,
}


def create_provider(
    provider_type: BrokerageProviderType,
    **kwargs,
) -> BaseBrokerageClient:
    """Instantiate a client by type, forwarding kwargs to its constructor."""
    return PROVIDER_CLASSES[provider_type](**kwargs)


__all__ = [
    "BaseBrokerageClient",
    "MockBrokerageClient",
    "PROVIDER_CLASSES",
    "TradierClient",
    "create_provider",
]
