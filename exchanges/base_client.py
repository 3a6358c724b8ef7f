"""
Shared REST Client Base

Session handling and a single-shot GET used by every exchange's api_client.
There is no retry: one call is one outbound request, and any failure surfaces
as an UpstreamError for the aggregator to record against that exchange.

Usage:
    class KrakenAPIClient(BaseAPIClient):
        EXCHANGE = "kraken"

    async with KrakenAPIClient("https://api.kraken.com") as client:
        data = await client._get("/0/public/Ticker", {"pair": "XBTUSD"})
"""

import asyncio
import json
import math
import time
from typing import Any, Dict, Optional

import aiohttp

from core.exceptions import UpstreamError
from core.logging import get_logger, log_api_request, log_api_response


class BaseAPIClient:
    """
    Async HTTP client base for exchange REST APIs

    Attributes:
        EXCHANGE: Exchange id used in log lines and error messages
        base_url: API base URL (no trailing slash)
        timeout: aiohttp total timeout in seconds
        user_agent: User-Agent header value
        session: aiohttp ClientSession, created on __aenter__
    """

    EXCHANGE = "exchange"

    def __init__(self, base_url: str, timeout: float = 10.0, user_agent: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = get_logger(self.__class__.__module__)
        self.session: Optional[aiohttp.ClientSession] = None

    # ============================================
    # Context Manager for Session Management
    # ============================================

    async def __aenter__(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            self.logger.debug(f"{self.__class__.__name__} session created")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug(f"{self.__class__.__name__} session closed")

    # ============================================
    # HTTP Request Handler
    # ============================================

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a single GET request and decode the JSON body.

        Args:
            path: API endpoint path (e.g., "/api/v3/ticker/bookTicker")
            params: Optional query parameters

        Returns:
            Decoded JSON body of a 2xx reply

        Raises:
            UpstreamError: Session missing, connection failure, timeout, non-2xx
                           status (with .status and decoded .payload), or a 2xx
                           body that is not JSON
        """
        if not self.session:
            raise UpstreamError(f"{self.EXCHANGE} client session not initialized. Use 'async with' statement.")

        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        log_api_request(self.EXCHANGE, path, params)
        started = time.monotonic()

        try:
            async with self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as resp:
                log_api_response(self.EXCHANGE, path, resp.status, time.monotonic() - started)
                text = await resp.text()

                if 200 <= resp.status < 300:
                    try:
                        return json.loads(text)
                    except ValueError:
                        raise UpstreamError(
                            f"{self.EXCHANGE} returned a non-JSON body on {path}",
                            status=resp.status
                        )

                self.logger.warning(f"HTTP {resp.status} on {self.EXCHANGE} {path}: {text[:200]}")
                raise UpstreamError(
                    f"HTTP {resp.status} from {self.EXCHANGE}",
                    status=resp.status,
                    payload=_decode_json(text)
                )

        except asyncio.TimeoutError:
            raise UpstreamError(f"Timeout on {self.EXCHANGE} {path} after {self.timeout:g}s")

        except aiohttp.ClientError as e:
            raise UpstreamError(f"Request to {self.EXCHANGE} failed: {e}")


# ============================================
# Parsing Helpers
# ============================================

def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def parse_price(value: Any, field: str, exchange: str) -> Optional[float]:
    """
    Convert an exchange price field to float.

    None and "" mean the exchange gave no price and map to None. "0" maps to 0.0.

    Raises:
        UpstreamError: If the value is not numeric, or is NaN/infinite

    Example:
        >>> parse_price("60050.10", "askPrice", "binance")
        60050.1
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise UpstreamError(f"{exchange} returned a non-numeric {field}: {value!r}")
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise UpstreamError(f"{exchange} returned a non-numeric {field}: {value!r}")

    if not math.isfinite(price):
        raise UpstreamError(f"{exchange} returned a non-finite {field}: {value!r}")
    return price
