"""
Best-Price Reduction

Scans per-exchange results and picks the cheapest place to buy (lowest ask)
and the best place to sell (highest bid).

Rules:
    - Error slots are skipped entirely.
    - A Quote with ask=None is skipped for bestBuy; bid=None is skipped for bestSell.
    - NaN and infinite sides are skipped the same way.
    - Ties go to the first exchange in iteration order (request order).
"""

import math
from typing import Mapping, Optional, Tuple

from core.schemas import ExchangeResult, Quote


def find_best_prices(prices: Mapping[str, ExchangeResult]) -> Tuple[Optional[str], Optional[str]]:
    """
    Compute (best_buy, best_sell) exchange ids.

    Example:
        >>> find_best_prices({
        ...     "binance": Quote(bid=60000, ask=60050),
        ...     "kraken": Quote(bid=60100, ask=60040),
        ... })
        ('kraken', 'kraken')
    """
    best_buy, min_ask = None, None
    best_sell, max_bid = None, None

    for exchange, result in prices.items():
        if not isinstance(result, Quote):
            continue

        if _usable(result.ask) and (min_ask is None or result.ask < min_ask):
            min_ask, best_buy = result.ask, exchange

        if _usable(result.bid) and (max_bid is None or result.bid > max_bid):
            max_bid, best_sell = result.bid, exchange

    return best_buy, best_sell


def _usable(price: Optional[float]) -> bool:
    return price is not None and math.isfinite(price)
