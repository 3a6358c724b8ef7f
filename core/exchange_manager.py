"""
Exchange Manager — Central Registry for Exchange Adapters

This module provides a centralized registry mapping exchange ids to adapter
instances. The aggregator resolves every requested id through it.

Architecture Pattern:
    Registry/Factory:
    - ExchangeManager maintains one adapter instance per exchange id
    - The aggregator requests adapters by id
    - All adapters conform to ExchangeInterface

    Adding a new exchange:
    1. Create the adapter class (e.g., CoinbaseExchange)
    2. Register it in ExchangeManager.__init__
"""

import asyncio
from typing import Dict, Iterable, List, Optional
from core.exceptions import UnsupportedExchangeError
from core.exchange_interface import ExchangeInterface
from core.logging import logger


class ExchangeManager:
    """
    Central Manager for Exchange Adapters

    Attributes:
        exchanges: Dictionary mapping exchange ids to adapter instances
                   Example: {"binance": BinanceExchange(), "kraken": KrakenExchange()}

    Example:
        >>> manager = ExchangeManager()
        >>> await manager.initialize_all()
        >>> kraken = manager.get_exchange("kraken")
        >>> await manager.shutdown_all()
    """

    def __init__(self, exchanges: Optional[Iterable[ExchangeInterface]] = None):
        """
        Register adapters.

        Args:
            exchanges: Adapters to register instead of the default set
        """
        if exchanges is None:
            # Each exchange module imports from core, so we can't import at module level
            from exchanges.binance import BinanceExchange
            from exchanges.bitstamp import BitstampExchange
            from exchanges.kraken import KrakenExchange

            exchanges = [BinanceExchange(), KrakenExchange(), BitstampExchange()]

        self.exchanges: Dict[str, ExchangeInterface] = {
            exchange.name.lower(): exchange for exchange in exchanges
        }

        logger.info(f"ExchangeManager initialized with {len(self.exchanges)} exchange(s): {', '.join(self.exchanges.keys())}")

    # ============================================
    # Exchange Retrieval Methods
    # ============================================

    def get_exchange(self, name: str) -> ExchangeInterface:
        """
        Get an exchange adapter by id (case-insensitive).

        Raises:
            UnsupportedExchangeError: If no adapter is registered under that id.
                The message carries the id exactly as given.
        """
        exchange = self.exchanges.get(name.lower())
        if exchange is None:
            logger.debug(f"Exchange '{name}' not found. Available: {', '.join(self.exchanges.keys())}")
            raise UnsupportedExchangeError(name)
        return exchange

    def has_exchange(self, name: str) -> bool:
        return name.lower() in self.exchanges

    def list_exchanges(self) -> List[str]:
        return list(self.exchanges.keys())

    # ============================================
    # Lifecycle Management
    # ============================================

    async def initialize_all(self) -> None:
        """
        Initialize all registered adapters.

        A failing adapter is logged and skipped; it will retry lazily on first use.
        """
        logger.info("Initializing all exchanges...")

        for name, exchange in self.exchanges.items():
            try:
                await exchange.initialize()
            except Exception as e:
                logger.error(f"✗ Failed to initialize {name}: {e}")

        logger.info("All exchanges initialized")

    async def shutdown_all(self) -> None:
        """Shutdown all adapters, continuing past individual failures."""
        logger.info("Shutting down all exchanges...")

        for name, exchange in self.exchanges.items():
            try:
                await exchange.shutdown()
            except Exception as e:
                logger.error(f"✗ Error shutting down {name}: {e}")

        logger.info("All exchanges shut down")

    # ============================================
    # Health Check Methods
    # ============================================

    async def health_check_all(self) -> Dict[str, bool]:
        """
        Check health status of all exchanges concurrently.

        Returns:
            Dict[str, bool]: {exchange id: reachable}

        Example:
            >>> await manager.health_check_all()
            {'binance': True, 'kraken': True, 'bitstamp': False}
        """
        names = list(self.exchanges.keys())
        results = await asyncio.gather(
            *(self.exchanges[name].health_check() for name in names),
            return_exceptions=True
        )

        health_status = {}
        for name, result in zip(names, results):
            if isinstance(result, Exception):
                logger.error(f"Health check failed for {name}: {result}")
                health_status[name] = False
            else:
                health_status[name] = bool(result)

        return health_status

    def __repr__(self) -> str:
        return f"<ExchangeManager(exchanges={list(self.exchanges.keys())})>"

    def __len__(self) -> int:
        return len(self.exchanges)
