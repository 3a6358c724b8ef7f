"""
Exchange Adapters Package

Each exchange (Binance, Kraken, Bitstamp) has its own subfolder with:
- __init__.py: Adapter class implementing ExchangeInterface (symbol mapping, lifecycle)
- api_client.py: REST client and response normalization to Quote

base_client.py holds the shared aiohttp session handling and price parsing.
"""
