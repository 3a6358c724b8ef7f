"""
Unified Logging Configuration

Every module logs through a child of the "arbscanner" logger instead of print().

Usage:
    from core.logging import logger, get_logger

    logger.info("General informational messages")

    log = get_logger(__name__)
    log.debug("Detailed debugging information")

Configuration:
    Log level is controlled by the LOG_LEVEL setting in .env file (default INFO).
"""

import logging
import sys

from core.config import settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure the root handler and return the application logger.

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Application started")
        2024-01-01 12:00:00 [INFO] arbscanner: Application started
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    logger = logging.getLogger("arbscanner")
    logger.setLevel(level)
    return logger


logger = setup_logging(log_level=settings.log_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a specific module or component.

    Example:
        # In exchanges/kraken/api_client.py:
        logger = get_logger(__name__)  # "arbscanner.exchanges.kraken.api_client"
    """
    return logging.getLogger(f"arbscanner.{name}")


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(exchange: str, endpoint: str, params: dict = None) -> None:
    """
    Log an API request with consistent formatting.

    Example:
        >>> log_api_request("kraken", "/0/public/Ticker", {"pair": "XBTUSD"})
        [DEBUG] API Request: kraken /0/public/Ticker | Params: {'pair': 'XBTUSD'}
    """
    if params:
        logger.debug(f"API Request: {exchange} {endpoint} | Params: {params}")
    else:
        logger.debug(f"API Request: {exchange} {endpoint}")


def log_api_response(exchange: str, endpoint: str, status: int, response_time: float = None) -> None:
    """
    Log an API response with status and timing information.

    Example:
        >>> log_api_response("binance", "/api/v3/ticker/bookTicker", 200, 0.342)
        [DEBUG] API Response: binance /api/v3/ticker/bookTicker | Status: 200 | Time: 0.342s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time else ""
    logger.debug(f"API Response: {exchange} {endpoint} | Status: {status}{time_str}")
