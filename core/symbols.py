"""
Symbol Normalization

Turns a "BASE/QUOTE" ticker into a NormalizedPair and applies per-exchange
base-asset aliasing (e.g., Kraken spells Bitcoin "XBT").

Asset codes are not checked against any list; an unknown code simply makes the
exchange answer "unknown pair", which the adapter soft-fails.
"""

from typing import Mapping, Optional

from core.exceptions import ValidationError
from core.schemas import NormalizedPair


def split_symbol(ticker: str) -> NormalizedPair:
    """
    Split a ticker into its base and quote assets.

    The ticker is stripped and upper-cased first.

    Raises:
        ValidationError: If the ticker does not split into exactly two non-empty tokens

    Example:
        >>> split_symbol("btc/usd")
        NormalizedPair(base='BTC', quote='USD')
    """
    parts = [part.strip() for part in ticker.strip().upper().split("/")]
    if len(parts) != 2 or not all(parts):
        raise ValidationError(f"Invalid symbol '{ticker}': expected BASE/QUOTE, e.g. BTC/USD")
    return NormalizedPair(base=parts[0], quote=parts[1])


def apply_base_alias(pair: NormalizedPair, aliases: Optional[Mapping[str, str]]) -> NormalizedPair:
    """
    Respell the base asset the way a given exchange expects it.

    Example:
        >>> apply_base_alias(NormalizedPair(base="BTC", quote="USD"), {"BTC": "XBT"})
        NormalizedPair(base='XBT', quote='USD')
    """
    if not aliases or pair.base not in aliases:
        return pair
    return NormalizedPair(base=aliases[pair.base], quote=pair.quote)
