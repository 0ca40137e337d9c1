import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import health, swap, tokens
from .api.responses import error_response
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = {
    "GET /": "API documentation",
    "GET /healthz": "Provider health",
    "GET /api/tokens": "Get all tokens",
    "GET /api/tokens/category/:category": "Get tokens by category",
    "GET /api/tokens/:address": "Get token by address",
    "GET /api/tokens/count": "Get token count",
    "GET /api/wallet/:address/balances": "Get wallet balances",
    "POST /api/quote": "Get swap quote",
    "POST /api/swap": "Execute swap",
}

# Create FastAPI app
app = FastAPI(
    title="Monorail DEX API",
    description="Token lookup, swap quotes and swap execution backed by Monorail",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["Health"])
app.include_router(tokens.router, tags=["Tokens"])
app.include_router(swap.router, tags=["Swap"])


@app.exception_handler(RequestValidationError)
async def invalid_parameters_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        400,
        "Invalid parameters",
        "Request does not match the expected shape",
        details=jsonable_encoder(exc.errors()),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"error": "Endpoint not found", "available_endpoints": AVAILABLE_ENDPOINTS},
        )
    return error_response(exc.status_code, str(exc.detail), str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return error_response(500, "Internal server error", str(exc))


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "name": "Monorail DEX API",
        "version": __version__,
        "description": "Token lookup, swap quotes and swap execution backed by Monorail",
        "docs": "/docs",
        "health": "/healthz",
        "endpoints": AVAILABLE_ENDPOINTS,
    }


def run() -> None:
    import uvicorn

    setup_logging()
    uvicorn.run(
        "monorail_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
