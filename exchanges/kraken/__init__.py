"""
Kraken Exchange Adapter

Implements ExchangeInterface for Kraken spot.

Symbol Mapping:
    Kraken spells Bitcoin "XBT", so the base asset is aliased before the pair
    token is built: BTC/USD -> XBTUSD. Quote assets are used as-is.

Endpoints Used:
    - GET /0/public/Ticker - Ticker information
    - GET /0/public/Time - Health check
"""

from core.exchange_interface import ExchangeInterface
from core.schemas import NormalizedPair, Quote
from core.logging import logger
from .api_client import KrakenAPIClient


class KrakenExchange(ExchangeInterface):
    """Kraken Spot Exchange Adapter"""

    name = "kraken"

    base_aliases = {"BTC": "XBT"}

    def __init__(self):
        from core.config import settings

        self.base_url = settings.kraken_base_url
        self.timeout = settings.exchange_timeout
        self.user_agent = settings.user_agent
        self.client: KrakenAPIClient = None

        logger.debug(f"KrakenExchange created (base_url={self.base_url})")

    async def initialize(self) -> None:
        if self.client is not None:
            return
        logger.info("Initializing Kraken exchange adapter...")
        self.client = KrakenAPIClient(self.base_url, timeout=self.timeout, user_agent=self.user_agent)
        await self.client.__aenter__()
        logger.info("✓ Kraken exchange adapter initialized")

    async def shutdown(self) -> None:
        if self.client:
            await self.client.__aexit__(None, None, None)
            self.client = None
        logger.info("✓ Kraken exchange adapter shut down")

    async def health_check(self) -> bool:
        if not self.client:
            return False
        return await self.client.get_server_time()

    def pair_token(self, pair: NormalizedPair) -> str:
        """
        Build the Kraken pair for a normalized pair.

        Example:
            >>> KrakenExchange().pair_token(NormalizedPair(base="BTC", quote="USD"))
            'XBTUSD'
        """
        local = self.localize(pair)
        return f"{local.base}{local.quote}"

    async def fetch_quote(self, pair: NormalizedPair) -> Quote:
        if self.client is None:
            await self.initialize()
        return await self.client.get_ticker(self.pair_token(pair))
