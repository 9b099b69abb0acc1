"""
Acme Dashboard API

REST API for the invoices/customers dashboard, backed by a hosted
Postgres store.

Run with: uvicorn dashboard_api.main:app --port 8001 --reload
"""
import os
import time as _time_module
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

# Configure structured logging FIRST (before any logger calls)
from .middleware.structlog_config import configure as configure_logging
configure_logging(os.environ.get("LOG_LEVEL", "INFO"), os.environ.get("LOG_FORMAT"))

import structlog

from .dependencies import STORE_URL, close_supabase, get_store, store_configured
from .middleware import RequestLoggingMiddleware, register_error_handlers
from .models import ErrorResponse
from .store import StoreClient
from .routers import (
    customers_router,
    dashboard_router,
    invoice_query_router,
    invoices_router,
    revenue_router,
)

logger = structlog.get_logger("acme.api")

# Track server start time for uptime reporting
_server_start_time = _time_module.time()


def _startup_checks():
    """Verify configuration at startup. Problems are logged, not fatal."""
    if not store_configured():
        logger.error("startup_check_failed", check="store_configured")
    else:
        logger.info("startup_checks_passed", store_url=STORE_URL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup checks; the shared store session is closed on shutdown."""
    _startup_checks()
    yield
    await close_supabase()
    logger.info("Shutting down.")


API_TITLE = "Acme Dashboard API"
API_DESCRIPTION = """
Read API for the invoices/customers dashboard.

### Core Endpoints

- **Revenue** - Monthly revenue for the chart
- **Dashboard** - Summary cards (counts, paid/pending totals)
- **Invoices** - Latest invoices, searchable table, page count, edit form lookup
- **Customers** - Picker list and customer table with invoice totals
"""
API_VERSION = "1.0.0"

_docs_enabled = os.environ.get("ENABLE_DOCS", "true").lower() == "true"
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    lifespan=lifespan,
)

# Register global error handlers
register_error_handlers(app)

# Request logging middleware (must be added before CORS/GZip so it wraps them)
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware for frontend access
_default_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
cors_origins = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", ",".join(_default_origins)).split(",")
    if origin.strip()
]
if "*" in cors_origins:
    logger.warning("Wildcard CORS origin rejected for security; falling back to localhost defaults")
    cors_origins = _default_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Accept-Language"],
)


# Security headers middleware
@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response

# GZip compression for responses > 1KB
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Include routers; every data route documents the error envelope
_error_responses = {500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}
app.include_router(revenue_router, prefix="/api/v1", responses=_error_responses)
app.include_router(dashboard_router, prefix="/api/v1", responses=_error_responses)
app.include_router(invoices_router, prefix="/api/v1", responses=_error_responses)
app.include_router(invoice_query_router, prefix="/api/v1", responses=_error_responses)
app.include_router(customers_router, prefix="/api/v1", responses=_error_responses)


@app.get("/", tags=["root"])
async def root():
    """API root - returns basic info and links."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "docs": "/docs" if _docs_enabled else None,
        "endpoints": {
            "revenue": "/api/v1/revenue",
            "cards": "/api/v1/dashboard/cards",
            "latest_invoices": "/api/v1/invoices/latest",
            "invoices": "/api/v1/invoices",
            "invoice_pages": "/api/v1/invoices/pages",
            "invoice": "/api/v1/invoices/{invoice_id}",
            "invoices_by_amount": "/api/v1/query",
            "customers": "/api/v1/customers",
            "customers_table": "/api/v1/customers/table",
        },
    }


@app.get("/health", tags=["root"])
async def health_check(store: StoreClient = Depends(get_store)):
    """Health check endpoint with store reachability and uptime.

    Without store settings the dependency itself answers 503 STORE_UNAVAILABLE.
    """
    uptime_seconds = round(_time_module.time() - _server_start_time)

    reachable = await store.ping()
    if reachable:
        store_info = {"status": "connected"}
    else:
        store_info = {"status": "unreachable"}

    return JSONResponse(
        status_code=200 if reachable else 503,
        content={
            "status": "healthy" if reachable else "unavailable",
            "version": API_VERSION,
            "store": store_info,
            "uptime_seconds": uptime_seconds,
        },
    )


# Main entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
