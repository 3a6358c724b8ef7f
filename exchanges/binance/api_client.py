"""
Binance REST API Client

Async client for the Binance spot book-ticker endpoint.

API Documentation:
    https://binance-docs.github.io/apidocs/spot/en/#symbol-order-book-ticker

Error Bodies:
    Binance reports application errors as {"code": -1121, "msg": "Invalid symbol."},
    usually with HTTP 400. Any body carrying a non-zero code is treated as
    "no quote available" and returns an empty Quote rather than failing.

Usage:
    async with BinanceAPIClient("https://api.binance.com") as client:
        quote = await client.get_book_ticker("BTCUSDT")
"""

from typing import Any

from core.exceptions import UpstreamError
from core.schemas import Quote
from exchanges.base_client import BaseAPIClient, parse_price


class BinanceAPIClient(BaseAPIClient):
    """
    Async HTTP client for Binance spot REST API

    Example:
        >>> async with BinanceAPIClient("https://api.binance.com") as client:
        ...     quote = await client.get_book_ticker("ETHUSDT")
        ...     print(f"{quote.bid} / {quote.ask}")
    """

    EXCHANGE = "binance"

    async def get_book_ticker(self, symbol: str) -> Quote:
        """
        Fetch the best bid/ask for a symbol.

        Args:
            symbol: Concatenated Binance symbol (e.g., "BTCUSDT")

        Returns:
            Quote with bid/ask, or an empty Quote if Binance rejects the symbol

        Binance Endpoint:
            GET /api/v3/ticker/bookTicker?symbol={symbol}

        Response Format:
            {
              "symbol": "BTCUSDT",
              "bidPrice": "60000.01000000",
              "bidQty": "1.23400000",
              "askPrice": "60050.00000000",
              "askQty": "0.50000000"
            }
        """
        try:
            data = await self._get("/api/v3/ticker/bookTicker", {"symbol": symbol})
        except UpstreamError as e:
            if _has_error_code(e.payload):
                self.logger.info(f"Binance has no book ticker for {symbol}: {e.payload.get('msg')}")
                return Quote()
            raise

        if not isinstance(data, dict):
            raise UpstreamError(f"binance returned an unexpected book ticker payload for {symbol}")

        if _has_error_code(data):
            self.logger.info(f"Binance has no book ticker for {symbol}: {data.get('msg')}")
            return Quote()

        return Quote(
            bid=parse_price(data.get("bidPrice"), "bidPrice", self.EXCHANGE),
            ask=parse_price(data.get("askPrice"), "askPrice", self.EXCHANGE)
        )

    async def ping(self) -> bool:
        """
        Test connectivity.

        Binance Endpoint:
            GET /api/v3/ping  (returns {})
        """
        try:
            await self._get("/api/v3/ping")
            return True
        except UpstreamError as e:
            self.logger.error(f"Binance ping failed: {e}")
            return False


def _has_error_code(payload: Any) -> bool:
    return isinstance(payload, dict) and bool(payload.get("code"))
