"""
Normalized Data Schemas

This module defines Pydantic models for the scanner's request and response shapes.

Key Principle:
    Regardless of which exchange a quote comes from (Binance, Kraken, Bitstamp),
    it gets normalized into the same Quote schema so the best-price reduction can
    compare them directly.

Models:
    - NormalizedPair: (base, quote) pair derived once per request
    - Quote: Best bid/ask snapshot from one exchange (either side may be absent)
    - ExchangeError: Per-exchange failure slot
    - ScanInput / ScanRequest: Inbound POST body ({"input": {...}})
    - ScanResult / ScanResponse: Outbound body ({"output": {...}})

Absent prices are None (JSON null), never 0.0, so a real zero price stays
distinguishable from a missing one.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================
# Currency Pair
# ============================================

class NormalizedPair(BaseModel):
    """
    A currency pair split out of a "BASE/QUOTE" ticker.

    Immutable: one instance is shared read-only by every adapter call of a request.

    Example:
        >>> NormalizedPair(base="BTC", quote="USD")
        NormalizedPair(base='BTC', quote='USD')
    """

    model_config = ConfigDict(frozen=True)

    base: str = Field(..., min_length=1, examples=["BTC", "ETH"])
    quote: str = Field(..., min_length=1, examples=["USD", "EUR"])

    @property
    def symbol(self) -> str:
        return f"{self.base}/{self.quote}"


# ============================================
# Per-Exchange Results
# ============================================

class Quote(BaseModel):
    """
    Best bid/ask from a single exchange.

    Attributes:
        bid: Highest price a buyer currently pays, None if the exchange gave none
        ask: Lowest price a seller currently accepts, None if the exchange gave none

    Example:
        >>> Quote(bid=60000.0, ask=60050.0)
        >>> Quote()  # soft-fail: exchange answered but knows no such symbol
    """

    model_config = ConfigDict(extra="forbid")

    bid: Optional[float] = Field(default=None, description="Best bid price", examples=[60000.0])
    ask: Optional[float] = Field(default=None, description="Best ask price", examples=[60050.0])


class ExchangeError(BaseModel):
    """Failure recorded in place of a Quote for one exchange."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., examples=["Unsupported exchange: ftx"])


ExchangeResult = Union[Quote, ExchangeError]


# ============================================
# Request Envelope
# ============================================

class ScanInput(BaseModel):
    """
    Scanner input.

    Attributes:
        symbol: Ticker in the form BASE/QUOTE (e.g., "BTC/USD")
        exchanges: Exchange ids to query, in the order results should be reported
    """

    symbol: str = Field(..., min_length=1, examples=["BTC/USD"])
    exchanges: List[str] = Field(..., examples=[["binance", "kraken"]])

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Reject whitespace-only tickers"""
        if not v.strip():
            raise ValueError("symbol must not be blank")
        return v


class ScanRequest(BaseModel):
    """POST body: {"input": {"symbol": ..., "exchanges": [...]}}"""

    input: ScanInput


# ============================================
# Response Envelope
# ============================================

class ScanResult(BaseModel):
    """
    Aggregated scan outcome.

    Attributes:
        prices: Result per requested exchange id (Quote or ExchangeError)
        best_buy: Exchange with the lowest ask (serialized as "bestBuy")
        best_sell: Exchange with the highest bid (serialized as "bestSell")
    """

    model_config = ConfigDict(populate_by_name=True)

    prices: Dict[str, ExchangeResult] = Field(default_factory=dict)
    best_buy: Optional[str] = Field(default=None, alias="bestBuy")
    best_sell: Optional[str] = Field(default=None, alias="bestSell")


class ScanResponse(BaseModel):
    """POST reply: {"output": {"prices": ..., "bestBuy": ..., "bestSell": ...}}"""

    output: ScanResult
