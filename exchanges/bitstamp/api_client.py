"""
Bitstamp REST API Client

Async client for the Bitstamp v2 ticker endpoint.

API Documentation:
    https://www.bitstamp.net/api/#tag/Tickers

Quirks:
    - The pair is part of the path, lower-case, with a trailing slash.
    - An unknown pair answers HTTP 404; that is treated as "no quote available".

Usage:
    async with BitstampAPIClient("https://www.bitstamp.net") as client:
        quote = await client.get_ticker("btcusd")
"""

from core.exceptions import UpstreamError
from core.schemas import Quote
from exchanges.base_client import BaseAPIClient, parse_price


class BitstampAPIClient(BaseAPIClient):
    """Async HTTP client for Bitstamp public REST API"""

    EXCHANGE = "bitstamp"

    async def get_ticker(self, pair: str) -> Quote:
        """
        Fetch the best bid/ask for a pair.

        Args:
            pair: Lower-case concatenated pair (e.g., "btcusd")

        Bitstamp Endpoint:
            GET /api/v2/ticker/{pair}/

        Response Format:
            {
              "last": "60020",
              "bid": "60000",
              "ask": "60050",
              "timestamp": "1700000000",
              ...
            }
        """
        try:
            data = await self._get(f"/api/v2/ticker/{pair}/")
        except UpstreamError as e:
            if e.status == 404:
                self.logger.info(f"Bitstamp does not list {pair}")
                return Quote()
            raise

        if not isinstance(data, dict) or ("bid" not in data and "ask" not in data):
            raise UpstreamError(f"bitstamp ticker for {pair} has no bid/ask fields")

        return Quote(
            bid=parse_price(data.get("bid"), "bid", self.EXCHANGE),
            ask=parse_price(data.get("ask"), "ask", self.EXCHANGE)
        )
