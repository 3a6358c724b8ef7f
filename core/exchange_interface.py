"""
Exchange Interface — Abstract Contract for All Exchanges

This module defines the abstract base class that every exchange adapter must implement.
The aggregator only ever talks to ExchangeInterface, so adding an exchange means
writing one subclass and registering it in ExchangeManager.

Example:
    class KrakenExchange(ExchangeInterface):
        name = "kraken"
        base_aliases = {"BTC": "XBT"}

        async def fetch_quote(self, pair):
            # Kraken-specific implementation
            ...

    exchange = manager.get_exchange("kraken")
    quote = await exchange.fetch_quote(NormalizedPair(base="BTC", quote="USD"))
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping
from core.schemas import NormalizedPair, Quote
from core.symbols import apply_base_alias


class ExchangeInterface(ABC):
    """
    Abstract Base Class for Exchange Adapters

    Class Attributes:
        name: Unique identifier for the exchange (lowercase, e.g., "binance")
        base_aliases: Exchange-specific spellings of base assets (e.g., {"BTC": "XBT"})

    Abstract Methods:
        - fetch_quote: Fetch the current best bid/ask for a pair

    Optional Methods (can be overridden):
        - initialize: Open the HTTP session
        - shutdown: Close the HTTP session
        - health_check: Verify the exchange API is reachable
    """

    name: str
    """Unique exchange identifier (lowercase). Example: "binance", "kraken" """

    base_aliases: Mapping[str, str] = MappingProxyType({})
    """Base-asset respelling applied before building the exchange's pair token"""

    @abstractmethod
    async def fetch_quote(self, pair: NormalizedPair) -> Quote:
        """
        Fetch the current best bid and ask for a currency pair.

        Args:
            pair: Normalized pair as parsed from the request (aliases NOT yet applied;
                  use localize() to get the exchange's spelling)

        Returns:
            Quote: bid/ask as floats. Both are None when the exchange answered but
                   does not list the pair (soft-fail).

        Raises:
            UpstreamError: Network failure, unexpected HTTP status, or a body that
                           cannot be parsed

        Example:
            >>> quote = await exchange.fetch_quote(NormalizedPair(base="BTC", quote="USD"))
            >>> print(quote.bid, quote.ask)
        """
        ...

    def localize(self, pair: NormalizedPair) -> NormalizedPair:
        """Apply this exchange's base-asset aliases to a pair."""
        return apply_base_alias(pair, self.base_aliases)

    # ============================================
    # Optional Lifecycle Methods
    # ============================================

    async def initialize(self) -> None:
        """
        Initialize the adapter (e.g., open an aiohttp ClientSession).

        Called by ExchangeManager.initialize_all(). Should be idempotent.
        """
        pass

    async def shutdown(self) -> None:
        """
        Release adapter resources. Called by ExchangeManager.shutdown_all().
        """
        pass

    async def health_check(self) -> bool:
        """
        Check if the exchange API is reachable.

        Should not raise; return False on errors.
        """
        return True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name}')>"
