"""
BaseService — common patterns for domain services.

All domain services inherit from this to get standardized store reads
and the error classification every public read shares.
"""
from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, TypeVar

import structlog

from ..middleware.error_handler import DataAccessError, ShapingError, StoreUnavailableError
from ..store import StoreClient, StoreError, StoreResult

logger = structlog.get_logger("acme.services")

T = TypeVar("T")


class StoreQueryError(Exception):
    """Raised inside a service when the store handed back an error object."""

    def __init__(self, error: StoreError):
        self.error = error
        super().__init__(error.message)


def fetch_guard(message: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap a public read so every failure surfaces as a DataAccessError.

    Callers only ever see `message`. The underlying error is logged and
    chained; store failures become StoreUnavailableError, anything raised
    while reshaping rows becomes ShapingError.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except DataAccessError:
                raise
            except StoreQueryError as exc:
                logger.error(
                    "database_error",
                    operation=func.__name__,
                    error=exc.error.message,
                    code=exc.error.code,
                )
                raise StoreUnavailableError(message) from exc
            except Exception as exc:
                logger.error(
                    "shaping_error",
                    operation=func.__name__,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise ShapingError(message) from exc

        return wrapper

    return decorator


class BaseService:
    """Base class for domain services."""

    async def _execute(self, store: StoreClient, query: Any) -> StoreResult:
        """Run a built read, raising StoreQueryError when the store reports an error."""
        result = await store.execute(query)
        if result.error is not None:
            raise StoreQueryError(result.error)
        return result

    async def _execute_many(self, store: StoreClient, query: Any) -> list[dict]:
        """Run a read expecting multiple rows."""
        result = await self._execute(store, query)
        return result.data or []

    async def _execute_one(self, store: StoreClient, query: Any) -> dict | None:
        """Run a read expecting at most one row."""
        rows = await self._execute_many(store, query)
        return rows[0] if rows else None

    async def _execute_count(self, store: StoreClient, query: Any) -> int:
        """Run a head/count read and return the reported total (0 if absent)."""
        result = await self._execute(store, query)
        return result.count or 0
