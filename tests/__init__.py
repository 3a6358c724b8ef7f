"""
Test Suite

Contains unit tests for the scanner.

Structure:
- tests/unit/: Tests for individual components (symbols, adapters, aggregator, HTTP app)

Uses pytest with pytest-asyncio for testing async functionality. No test
touches the network: adapters and HTTP sessions are mocked.
"""
