"""
Shared fixtures: in-memory exchange adapters that never touch the network.
"""

import asyncio
from typing import Optional

import pytest

from core.exchange_interface import ExchangeInterface
from core.schemas import NormalizedPair, Quote


class FakeExchange(ExchangeInterface):
    """
    Adapter returning a canned Quote (or raising a canned error) after an optional delay.

    Records every pair it was asked for in .calls.
    """

    def __init__(
        self,
        name: str,
        quote: Optional[Quote] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        healthy: bool = True
    ):
        self.name = name
        self.quote = quote if quote is not None else Quote()
        self.error = error
        self.delay = delay
        self.healthy = healthy
        self.calls = []
        self.initialized = False

    async def fetch_quote(self, pair: NormalizedPair) -> Quote:
        self.calls.append(pair)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.quote

    async def initialize(self) -> None:
        self.initialized = True

    async def shutdown(self) -> None:
        self.initialized = False

    async def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def make_exchange():
    """Factory fixture: make_exchange("binance", quote=Quote(bid=1, ask=2))"""
    return FakeExchange
