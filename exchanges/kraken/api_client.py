"""
Kraken REST API Client

Async client for the Kraken public Ticker endpoint.

API Documentation:
    https://docs.kraken.com/api/docs/rest-api/get-ticker-information

Quirks:
    - Kraken answers HTTP 200 even for errors; failures are listed in the
      top-level "error" array (e.g., ["EQuery:Unknown asset pair"]).
    - The result is keyed by Kraken's own canonical pair name, which differs
      from the requested one (XBTUSD -> "XXBTZUSD"). We take the sole entry.
    - Prices are arrays whose first element is the price: "b": ["60000.0", "1", "1.000"].

Usage:
    async with KrakenAPIClient("https://api.kraken.com") as client:
        quote = await client.get_ticker("XBTUSD")
"""

from typing import Any, Dict

from core.exceptions import UpstreamError
from core.schemas import Quote
from exchanges.base_client import BaseAPIClient, parse_price


UNKNOWN_PAIR_ERRORS = ("EQuery:Unknown asset pair",)


class KrakenAPIClient(BaseAPIClient):
    """Async HTTP client for Kraken public REST API"""

    EXCHANGE = "kraken"

    async def get_ticker(self, pair: str) -> Quote:
        """
        Fetch the best bid/ask for a pair.

        Args:
            pair: Concatenated Kraken pair (e.g., "XBTUSD")

        Returns:
            Quote with bid/ask, or an empty Quote if Kraken does not know the pair

        Raises:
            UpstreamError: Any other Kraken error, or a result that does not hold
                           exactly one ticker with b/a price arrays

        Kraken Endpoint:
            GET /0/public/Ticker?pair={pair}

        Response Format:
            {
              "error": [],
              "result": {
                "XXBTZUSD": {
                  "a": ["60050.00000", "1", "1.000"],
                  "b": ["60000.00000", "2", "2.000"],
                  ...
                }
              }
            }
        """
        data = await self._get("/0/public/Ticker", {"pair": pair})

        if not isinstance(data, dict):
            raise UpstreamError(f"kraken returned an unexpected ticker payload for {pair}")

        errors = data.get("error") or []
        if errors:
            if any(str(err).startswith(UNKNOWN_PAIR_ERRORS) for err in errors):
                self.logger.info(f"Kraken does not list {pair}")
                return Quote()
            raise UpstreamError(f"Kraken API error: {', '.join(str(err) for err in errors)}")

        ticker = sole_entry(data.get("result"), pair)

        try:
            bid = ticker["b"][0]
            ask = ticker["a"][0]
        except (KeyError, IndexError, TypeError):
            raise UpstreamError(f"kraken ticker for {pair} is missing bid/ask arrays")

        return Quote(
            bid=parse_price(bid, "b", self.EXCHANGE),
            ask=parse_price(ask, "a", self.EXCHANGE)
        )

    async def get_server_time(self) -> bool:
        """
        Health probe.

        Kraken Endpoint:
            GET /0/public/Time
        """
        try:
            data = await self._get("/0/public/Time")
            return isinstance(data, dict) and not data.get("error")
        except UpstreamError as e:
            self.logger.error(f"Kraken time check failed: {e}")
            return False


def sole_entry(result: Any, pair: str) -> Dict[str, Any]:
    """
    Return the value of a mapping that must hold exactly one key.

    Raises:
        UpstreamError: If result is not a mapping or has zero or several keys

    Example:
        >>> sole_entry({"XXBTZUSD": {"a": ["1"]}}, "XBTUSD")
        {'a': ['1']}
    """
    if not isinstance(result, dict):
        raise UpstreamError(f"kraken returned no result mapping for {pair}")
    if len(result) != 1:
        raise UpstreamError(f"kraken returned {len(result)} tickers for {pair}, expected exactly 1")
    (ticker,) = result.values()
    if not isinstance(ticker, dict):
        raise UpstreamError(f"kraken returned a malformed ticker for {pair}")
    return ticker
