"""
Function Descriptor

Static document served by GET /functions/cryptoArbitrageScanner so a function
registry can discover the endpoint's input and output shapes.
"""

FUNCTION_NAME = "cryptoArbitrageScanner"

DESCRIPTOR = {
    "name": FUNCTION_NAME,
    "description": "Compare a crypto's ask/bid across exchanges and report best opportunities",
    "input": {
        "type": "object",
        "properties": {
            "symbol": {
                "type": "string",
                "description": "Ticker in the form BASE/QUOTE, e.g. BTC/USD",
                "example": "BTC/USD"
            },
            "exchanges": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of exchange IDs (binance, kraken, bitstamp)",
                "example": ["binance", "kraken", "bitstamp"]
            }
        },
        "required": ["symbol", "exchanges"]
    },
    "output": {
        "type": "object",
        "properties": {
            "prices": {
                "type": "object",
                "additionalProperties": {
                    "type": "object",
                    "properties": {
                        "bid": {"type": ["number", "null"]},
                        "ask": {"type": ["number", "null"]},
                        "error": {"type": "string"}
                    }
                },
                "description": "Bid/ask by exchange, or an error for exchanges that failed",
                "example": {
                    "binance": {"bid": 60000, "ask": 60050},
                    "kraken": {"bid": 60100, "ask": 60040},
                    "ftx": {"error": "Unsupported exchange: ftx"}
                }
            },
            "bestBuy": {
                "type": ["string", "null"],
                "description": "Exchange with lowest ask",
                "example": "kraken"
            },
            "bestSell": {
                "type": ["string", "null"],
                "description": "Exchange with highest bid",
                "example": "kraken"
            }
        }
    }
}
