"""
Binance Exchange Adapter

Implements ExchangeInterface for Binance spot.

Symbol Mapping:
    Binance has no USD spot books, so a USD quote is routed to the USDT book
    (BTC/USD -> BTCUSDT). Every other quote asset is used as-is (ETH/BTC -> ETHBTC).

Endpoints Used:
    - GET /api/v3/ticker/bookTicker - Best bid/ask
    - GET /api/v3/ping - Health check
"""

from core.exchange_interface import ExchangeInterface
from core.schemas import NormalizedPair, Quote
from core.logging import logger
from .api_client import BinanceAPIClient


class BinanceExchange(ExchangeInterface):
    """
    Binance Spot Exchange Adapter

    Example:
        >>> exchange = BinanceExchange()
        >>> await exchange.initialize()
        >>> quote = await exchange.fetch_quote(NormalizedPair(base="BTC", quote="USD"))
        >>> await exchange.shutdown()
    """

    name = "binance"

    quote_aliases = {"USD": "USDT"}

    def __init__(self):
        # Import settings here to avoid circular imports
        from core.config import settings

        self.base_url = settings.binance_base_url
        self.timeout = settings.exchange_timeout
        self.user_agent = settings.user_agent

        # API client (will be created in initialize())
        self.client: BinanceAPIClient = None

        logger.debug(f"BinanceExchange created (base_url={self.base_url})")

    async def initialize(self) -> None:
        """Create the API client and its aiohttp session."""
        if self.client is not None:
            return
        logger.info("Initializing Binance exchange adapter...")
        self.client = BinanceAPIClient(self.base_url, timeout=self.timeout, user_agent=self.user_agent)
        await self.client.__aenter__()
        logger.info("✓ Binance exchange adapter initialized")

    async def shutdown(self) -> None:
        """Close the API client session."""
        if self.client:
            await self.client.__aexit__(None, None, None)
            self.client = None
        logger.info("✓ Binance exchange adapter shut down")

    async def health_check(self) -> bool:
        if not self.client:
            return False
        return await self.client.ping()

    def pair_token(self, pair: NormalizedPair) -> str:
        """
        Build the Binance symbol for a pair.

        Example:
            >>> BinanceExchange().pair_token(NormalizedPair(base="BTC", quote="USD"))
            'BTCUSDT'
        """
        local = self.localize(pair)
        return f"{local.base}{self.quote_aliases.get(local.quote, local.quote)}"

    async def fetch_quote(self, pair: NormalizedPair) -> Quote:
        if self.client is None:
            await self.initialize()
        return await self.client.get_book_ticker(self.pair_token(pair))
