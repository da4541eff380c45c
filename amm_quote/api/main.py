"""FastAPI application for trade quoting.

Note: Balances, allowances and reserves are supplied by the caller with each
request. This service never talks to a node.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from amm_quote import __version__
from amm_quote.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("AMM_QUOTE_HOST", "0.0.0.0")
PORT = int(os.environ.get("AMM_QUOTE_PORT", "8000"))
DEBUG = os.environ.get("AMM_QUOTE_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="AMM Quote",
    description="Constant product AMM trade quoting and validation",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog for console output."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def run() -> None:
    """Run the quoting API server.

    Configuration via environment variables:
    - AMM_QUOTE_HOST: Host to bind to (default: 0.0.0.0)
    - AMM_QUOTE_PORT: Port to bind to (default: 8000)
    - AMM_QUOTE_DEBUG: Enable debug logging and reload mode (default: false)
    - AMM_QUOTE_FEE_BPS, AMM_QUOTE_SLIPPAGE_BPS, AMM_QUOTE_MIN_GAS_BALANCE, ...:
      see QuoteConfig.from_env
    """
    configure_logging(DEBUG)
    uvicorn.run(
        "amm_quote.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
