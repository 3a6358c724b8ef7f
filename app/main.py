"""
FastAPI Application - Crypto Arbitrage Scanner

Exposes a single function endpoint that compares best bid/ask for a currency
pair across exchanges and reports where to buy and where to sell.

Supported Exchanges:
    - Binance (spot)
    - Kraken
    - Bitstamp

Calling Convention:
    GET  /functions/cryptoArbitrageScanner  -> input/output descriptor
    POST /functions/cryptoArbitrageScanner
         body:  {"input": {"symbol": "BTC/USD", "exchanges": ["binance", "kraken"]}}
         reply: {"output": {"prices": {...}, "bestBuy": "kraken", "bestSell": "binance"}}
         error: 400 {"error": "..."} on a malformed body

Usage:
    uvicorn app.main:app --reload --host 0.0.0.0 --port 3000
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from app.descriptor import DESCRIPTOR, FUNCTION_NAME
from core.aggregator import scan_symbol
from core.config import settings, validate_configuration
from core.exceptions import ValidationError
from core.exchange_manager import ExchangeManager
from core.logging import logger
from core.schemas import ScanRequest, ScanResponse


# ============================================
# Lifespan Management
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown."""
    logger.info("=== Application Starting ===")
    try:
        validate_configuration()
        await manager.initialize_all()
        logger.info("=== Started Successfully ===")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    yield

    logger.info("=== Shutting Down ===")
    try:
        await manager.shutdown_all()
        logger.info("=== Shutdown Complete ===")
    except Exception as e:
        logger.error(f"Shutdown error: {e}")


# ============================================
# FastAPI Application
# ============================================

app = FastAPI(
    title="Crypto Arbitrage Scanner",
    description=(
        "Compares best bid/ask for a BASE/QUOTE pair across exchanges.\n\n"
        "**Supported Exchanges:** Binance, Kraken, Bitstamp\n\n"
        "## Endpoints\n"
        f"- `GET /functions/{FUNCTION_NAME}` - Function descriptor\n"
        f"- `POST /functions/{FUNCTION_NAME}` - Run a scan\n"
        "- `GET /exchanges` - List supported exchanges\n"
        "- `GET /health` - Health check\n"
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"]
)

manager = ExchangeManager()  # Global exchange manager


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


# ============================================
# System Endpoints
# ============================================

@app.get("/", tags=["System"])
async def root():
    """API information and available exchanges."""
    return {
        "name": "Crypto Arbitrage Scanner",
        "version": "1.0.0",
        "status": "operational",
        "docs": "/docs",
        "functions": [f"/functions/{FUNCTION_NAME}"],
        "exchanges": manager.list_exchanges()
    }


@app.get("/health", tags=["System"])
async def health_check():
    """Health check - tests connectivity to all exchanges."""
    health = await manager.health_check_all()
    return {
        "status": "healthy" if all(health.values()) else "degraded",
        "exchanges": health
    }


@app.get("/exchanges", tags=["System"])
async def list_exchanges():
    """List all supported exchanges and their base-asset aliases."""
    return {
        "exchanges": [
            {
                "name": name,
                "aliases": dict(manager.get_exchange(name).base_aliases)
            }
            for name in manager.list_exchanges()
        ]
    }


# ============================================
# Function Endpoints
# ============================================

@app.get(f"/functions/{FUNCTION_NAME}", tags=["Functions"])
async def describe_scanner():
    """Input/output descriptor for function-registry discovery."""
    return DESCRIPTOR


@app.post(f"/functions/{FUNCTION_NAME}", response_model=ScanResponse, tags=["Functions"])
async def run_scanner(request: Request):
    """
    Compare bid/ask for a symbol across exchanges.

    Example:
        POST /functions/cryptoArbitrageScanner
        {"input": {"symbol": "BTC/USD", "exchanges": ["binance", "kraken"]}}
    """
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Request body must be a JSON object")

    scan_request = parse_scan_request(body)
    result = await scan_symbol(scan_request.input, manager)
    return ScanResponse(output=result)


def parse_scan_request(body: Any) -> ScanRequest:
    """
    Validate a decoded POST body.

    Raises:
        ValidationError: Missing input object, missing/blank symbol, or a
                         non-array exchanges field
    """
    if not isinstance(body, dict) or not isinstance(body.get("input"), dict):
        raise ValidationError("Missing input object with symbol and exchanges array")

    try:
        return ScanRequest.model_validate(body)
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Missing symbol or exchanges array ({details})")
