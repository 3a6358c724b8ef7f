"""
Core Package

Contains the exchange-agnostic core logic including:
- ExchangeInterface: Abstract base class every exchange adapter implements
- ExchangeManager: Registry mapping exchange ids to adapters
- Aggregator: Concurrent fan-out/fan-in with per-exchange failure isolation
- Best-price reduction, symbol normalization, and Pydantic schemas
"""
