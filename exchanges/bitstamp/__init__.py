"""
Bitstamp Exchange Adapter

Implements ExchangeInterface for Bitstamp.

Symbol Mapping:
    The pair is the lower-cased concatenation of base and quote:
    BTC/USD -> btcusd.

Endpoints Used:
    - GET /api/v2/ticker/{pair}/ - Ticker (also used for the health check on btcusd)
"""

from core.exceptions import UpstreamError
from core.exchange_interface import ExchangeInterface
from core.schemas import NormalizedPair, Quote
from core.logging import logger
from .api_client import BitstampAPIClient


HEALTH_CHECK_PAIR = "btcusd"


class BitstampExchange(ExchangeInterface):
    """Bitstamp Exchange Adapter"""

    name = "bitstamp"

    def __init__(self):
        from core.config import settings

        self.base_url = settings.bitstamp_base_url
        self.timeout = settings.exchange_timeout
        self.user_agent = settings.user_agent
        self.client: BitstampAPIClient = None

        logger.debug(f"BitstampExchange created (base_url={self.base_url})")

    async def initialize(self) -> None:
        if self.client is not None:
            return
        logger.info("Initializing Bitstamp exchange adapter...")
        self.client = BitstampAPIClient(self.base_url, timeout=self.timeout, user_agent=self.user_agent)
        await self.client.__aenter__()
        logger.info("✓ Bitstamp exchange adapter initialized")

    async def shutdown(self) -> None:
        if self.client:
            await self.client.__aexit__(None, None, None)
            self.client = None
        logger.info("✓ Bitstamp exchange adapter shut down")

    async def health_check(self) -> bool:
        if not self.client:
            return False
        try:
            quote = await self.client.get_ticker(HEALTH_CHECK_PAIR)
            return quote.bid is not None or quote.ask is not None
        except UpstreamError as e:
            logger.error(f"Bitstamp health check failed: {e}")
            return False

    def pair_token(self, pair: NormalizedPair) -> str:
        """
        Example:
            >>> BitstampExchange().pair_token(NormalizedPair(base="BTC", quote="USD"))
            'btcusd'
        """
        local = self.localize(pair)
        return f"{local.base}{local.quote}".lower()

    async def fetch_quote(self, pair: NormalizedPair) -> Quote:
        if self.client is None:
            await self.initialize()
        return await self.client.get_ticker(self.pair_token(pair))
