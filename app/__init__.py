"""
FastAPI Application Package

Serves the cryptoArbitrageScanner function endpoint (descriptor + invoke) on top
of the core aggregator.
"""
