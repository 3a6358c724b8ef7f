"""
Unit Tests for Best-Price Reduction

Run with:
    pytest tests/unit/test_best_price.py -v
"""

from core.best_price import find_best_prices
from core.schemas import ExchangeError, Quote


class TestFindBestPrices:
    """Tests for find_best_prices"""

    def test_lowest_ask_and_highest_bid_win(self):
        prices = {
            "binance": Quote(bid=60000, ask=60050),
            "kraken": Quote(bid=60100, ask=60040),
        }

        assert find_best_prices(prices) == ("kraken", "kraken")

    def test_buy_and_sell_can_differ(self):
        prices = {
            "binance": Quote(bid=60200, ask=60250),
            "kraken": Quote(bid=60100, ask=60040),
            "bitstamp": Quote(bid=60150, ask=60300),
        }

        assert find_best_prices(prices) == ("kraken", "binance")

    def test_ties_go_to_first_exchange(self):
        prices = {
            "kraken": Quote(bid=100, ask=101),
            "binance": Quote(bid=100, ask=101),
        }

        assert find_best_prices(prices) == ("kraken", "kraken")

    def test_errors_are_skipped(self):
        prices = {
            "ftx": ExchangeError(error="Unsupported exchange: ftx"),
            "kraken": Quote(bid=100, ask=101),
        }

        assert find_best_prices(prices) == ("kraken", "kraken")

    def test_non_finite_leader_does_not_block_later_quotes(self):
        prices = {
            "binance": Quote(bid=float("nan"), ask=float("nan")),
            "bitstamp": Quote(bid=float("inf"), ask=float("-inf")),
            "kraken": Quote(bid=60100, ask=60040),
        }

        assert find_best_prices(prices) == ("kraken", "kraken")

    def test_absent_sides_are_skipped_independently(self):
        prices = {
            "binance": Quote(bid=None, ask=99),
            "kraken": Quote(bid=100, ask=None),
        }

        assert find_best_prices(prices) == ("binance", "kraken")

    def test_zero_is_a_real_price(self):
        prices = {
            "binance": Quote(bid=0.0, ask=0.0),
            "kraken": Quote(bid=None, ask=5.0),
        }

        assert find_best_prices(prices) == ("binance", "binance")

    def test_nothing_usable(self):
        prices = {
            "binance": Quote(),
            "ftx": ExchangeError(error="Unsupported exchange: ftx"),
        }

        assert find_best_prices(prices) == (None, None)

    def test_empty_mapping(self):
        assert find_best_prices({}) == (None, None)
