"""
Configuration Management Module

This module handles loading, validating, and providing access to application configuration
from environment variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Key Features:
- Loads configuration from .env file
- Validates settings on startup
- Provides type-safe access to configuration values
- Converts comma-separated strings to lists (CORS origins)

Usage:
    from core.config import settings

    print(settings.kraken_base_url)
    print(settings.exchange_timeout)
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    """
    Application Settings

    Values are automatically loaded from environment variables or .env file.

    Attributes:
        app_host: Host address for FastAPI server
        app_port: Port number for FastAPI server, read from PORT or APP_PORT
        environment: Current environment (development, production)
        log_level: Logging level
        exchange_timeout: Upper bound in seconds for a single exchange fetch
        user_agent: User-Agent header sent to every exchange
        binance_base_url: Base URL for Binance spot REST API
        kraken_base_url: Base URL for Kraken REST API
        bitstamp_base_url: Base URL for Bitstamp REST API
        cors_origins: Comma-separated allowed CORS origins
    """

    # ============================================
    # Application Configuration
    # ============================================

    app_host: str = Field(
        default="0.0.0.0",
        description="FastAPI server host address"
    )

    app_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "APP_PORT"),
        description="FastAPI server port (PORT wins over APP_PORT)"
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, production)"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # ============================================
    # Upstream Exchange Configuration
    # ============================================

    exchange_timeout: float = Field(
        default=10.0,
        description="Per-exchange fetch timeout in seconds"
    )

    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; ArbitrageBot/1.0)",
        description="User-Agent header for exchange requests"
    )

    binance_base_url: str = Field(
        default="https://api.binance.com",
        description="Binance spot API base URL"
    )

    kraken_base_url: str = Field(
        default="https://api.kraken.com",
        description="Kraken public API base URL"
    )

    bitstamp_base_url: str = Field(
        default="https://www.bitstamp.net",
        description="Bitstamp public API base URL"
    )

    # ============================================
    # CORS Configuration
    # ============================================

    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Convert comma-separated CORS origins string to a list.

        Example:
            >>> settings.cors_origins_list
            ['http://localhost:3000', 'http://localhost:5173']
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def exchange_base_urls(self) -> dict:
        """Base URL per supported exchange id."""
        return {
            "binance": self.binance_base_url,
            "kraken": self.kraken_base_url,
            "bitstamp": self.bitstamp_base_url,
        }


# ============================================
# Global Settings Instance
# ============================================

settings = Settings()


# ============================================
# Configuration Validation
# ============================================

def validate_configuration() -> None:
    """
    Validate critical configuration settings on application startup.

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    # logging.py imports config.py, so we can't import at module level
    from core.logging import logger

    if not (1 <= settings.app_port <= 65535):
        raise ValueError(f"Invalid port number: {settings.app_port}. Must be between 1 and 65535")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if settings.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{settings.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    if settings.exchange_timeout <= 0:
        raise ValueError(f"EXCHANGE_TIMEOUT must be positive, got {settings.exchange_timeout}")

    for name, url in settings.exchange_base_urls.items():
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid {name.upper()}_BASE_URL: '{url}'")

    logger.info("Configuration validated successfully")
    logger.info(f"Server: {settings.app_host}:{settings.app_port}")
    logger.info(f"Exchange timeout: {settings.exchange_timeout}s")
    logger.info(f"Log level: {settings.log_level.upper()}")
