"""
Quote Aggregator

Fans one fetch per requested exchange out concurrently, waits for all of them,
and folds the results into a ScanResult.

Partial-failure contract:
    Whatever goes wrong for one exchange (unknown id, network error, bad body,
    timeout) is recorded as {"error": "..."} in that exchange's slot. The scan
    itself only fails on a malformed request, before any upstream call.

Usage:
    result = await scan_symbol(ScanInput(symbol="BTC/USD", exchanges=["binance", "kraken"]), manager)
    print(result.best_buy, result.best_sell)
"""

import asyncio
from typing import Iterable, Optional

from core.best_price import find_best_prices
from core.config import settings
from core.exchange_manager import ExchangeManager
from core.logging import get_logger
from core.schemas import ExchangeError, ExchangeResult, NormalizedPair, ScanInput, ScanResult
from core.symbols import split_symbol


logger = get_logger(__name__)


async def fetch_exchange_result(
    manager: ExchangeManager,
    exchange_id: str,
    pair: NormalizedPair,
    timeout: float
) -> ExchangeResult:
    """
    Fetch one exchange's quote, converting every failure into an ExchangeError.

    Args:
        manager: Registry used to resolve exchange_id
        exchange_id: Exchange id as requested by the caller
        pair: Normalized pair shared by all fetches of the request
        timeout: Seconds before the fetch is cancelled

    Returns:
        Quote on success, ExchangeError otherwise. Never raises Exception.
    """
    try:
        exchange = manager.get_exchange(exchange_id)
        return await asyncio.wait_for(exchange.fetch_quote(pair), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{exchange_id} {pair.symbol}: timed out after {timeout:g}s")
        return ExchangeError(error=f"Timed out after {timeout:g}s")
    except Exception as e:
        message = str(e) or e.__class__.__name__
        logger.warning(f"{exchange_id} {pair.symbol}: {message}")
        return ExchangeError(error=message)


async def aggregate(
    pair: NormalizedPair,
    exchange_ids: Iterable[str],
    manager: ExchangeManager,
    timeout: Optional[float] = None
) -> ScanResult:
    """
    Query every requested exchange concurrently and reduce to the best prices.

    Duplicate ids are collapsed to their first occurrence and fetched once.
    The prices mapping follows request order regardless of completion order.

    Args:
        pair: Normalized pair to quote
        exchange_ids: Requested exchange ids (may be empty)
        manager: Adapter registry
        timeout: Per-exchange timeout in seconds (defaults to EXCHANGE_TIMEOUT)
    """
    if timeout is None:
        timeout = settings.exchange_timeout

    ids = list(dict.fromkeys(exchange_ids))

    results = await asyncio.gather(
        *(fetch_exchange_result(manager, exchange_id, pair, timeout) for exchange_id in ids)
    )

    prices = dict(zip(ids, results))
    best_buy, best_sell = find_best_prices(prices)

    return ScanResult(prices=prices, best_buy=best_buy, best_sell=best_sell)


async def scan_symbol(
    scan_input: ScanInput,
    manager: ExchangeManager,
    timeout: Optional[float] = None
) -> ScanResult:
    """
    Parse the ticker and aggregate quotes for it.

    Raises:
        ValidationError: If the ticker is not BASE/QUOTE (no exchange is called)
    """
    pair = split_symbol(scan_input.symbol)
    result = await aggregate(pair, scan_input.exchanges, manager, timeout=timeout)

    failed = sum(1 for r in result.prices.values() if isinstance(r, ExchangeError))
    logger.info(
        f"Scanned {pair.symbol} on {len(result.prices)} exchange(s) "
        f"({failed} failed): bestBuy={result.best_buy} bestSell={result.best_sell}"
    )
    return result
