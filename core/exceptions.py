"""
Scanner Exceptions

Error taxonomy for the arbitrage scanner:

    ScannerError
    ├── ValidationError           - malformed request, answered with HTTP 400
    ├── UnsupportedExchangeError  - unknown exchange id, recorded per exchange
    └── UpstreamError             - network / HTTP / parse failure at an exchange

Only ValidationError ever reaches the HTTP layer. The other two are caught by
the aggregator and turned into an ``{"error": "..."}`` slot for that exchange.
"""

from typing import Any, Optional


class ScannerError(Exception):
    """Base class for all scanner errors."""


class ValidationError(ScannerError):
    """The inbound request is missing fields or has the wrong shape."""


class UnsupportedExchangeError(ScannerError):
    """The requested exchange id has no registered adapter."""

    def __init__(self, exchange: str):
        self.exchange = exchange
        super().__init__(f"Unsupported exchange: {exchange}")


class UpstreamError(ScannerError):
    """
    An exchange API call failed or returned something we cannot parse.

    Attributes:
        status: HTTP status of the upstream reply, if one was received
        payload: Decoded JSON body of a non-2xx reply, if it was JSON
    """

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload
