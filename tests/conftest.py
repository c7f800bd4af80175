"""Shared fixtures for symbolmap tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from symbolmap.cache import UnderlyingCache
from symbolmap.codec import TickerCodec
from symbolmap.providers.mock import MockBrokerageClient
from symbolmap.resolver import OptionsUniverseResolver

# 10:00 New York time on 2025-07-01
FIXED_NOW = datetime(2025, 7, 1, 14, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_client() -> MockBrokerageClient:
    return MockBrokerageClient()


@pytest.fixture
def codec() -> TickerCodec:
    """Codec with no cache or quote capability (hint-or-root decoding)."""
    return TickerCodec()


@pytest.fixture
def resolving_codec(mock_client) -> TickerCodec:
    """Codec that resolves equity option roots through the mock client."""
    return TickerCodec(
        underlying_cache=UnderlyingCache(),
        quote_underlying=mock_client.quote_underlying,
    )


@pytest.fixture
def resolver(mock_client) -> OptionsUniverseResolver:
    return OptionsUniverseResolver(mock_client, clock=lambda: FIXED_NOW)
