"""
Store adapter over the Supabase/PostgREST client.

Reads are built with the client's own request builders
(`store.table("invoices").select(...).eq(...)`) and run through
`StoreClient.execute`, which never raises for failed reads. API errors and
transport failures come back as a StoreResult carrying a StoreError, and the
service layer decides how to classify them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

import httpx
import structlog
from postgrest.exceptions import APIError

logger = structlog.get_logger("acme.store")

# Characters with meaning inside PostgREST logic trees (or=(...))
_RESERVED = re.compile(r'[,.:()"\\\s]')


@dataclass
class StoreError:
    """Error object reported by the store or the transport."""
    message: str
    code: str | None = None
    details: str | None = None
    hint: str | None = None


@dataclass
class StoreResult:
    """Outcome of one store read: rows, optional total count, or an error."""
    data: list[dict[str, Any]] | None = None
    count: int | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def quote_value(value: Any) -> str:
    """Render a value for a logic tree, double-quoting it when it holds reserved characters."""
    text = str(value)
    if _RESERVED.search(text):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


def ilike_any(columns: Iterable[str], term: str) -> str:
    """
    Filter string for `.or_()`: case-insensitive substring match on any column.

    ilike_any(["name", "email"], "acme") -> "name.ilike.%acme%,email.ilike.%acme%"
    """
    pattern = quote_value(f"%{term}%")
    return ",".join(f"{column}.ilike.{pattern}" for column in columns)


class StoreClient:
    """
    Thin wrapper around an async PostgREST client.

    In production the client is `supabase.AsyncClient.postgrest`; tests hand in
    a PostgREST client whose session is routed to an in-memory store.
    """

    def __init__(self, postgrest: Any):
        self._postgrest = postgrest

    def table(self, name: str) -> Any:
        """Start a request builder on a table."""
        return self._postgrest.from_(name)

    async def execute(self, query: Any) -> StoreResult:
        """Run a built read and normalize the outcome into a StoreResult."""
        try:
            response = await query.execute()
        except APIError as exc:
            return StoreResult(
                error=StoreError(
                    message=exc.message or str(exc),
                    code=exc.code,
                    details=exc.details,
                    hint=exc.hint,
                )
            )
        except httpx.HTTPError as exc:
            logger.debug("store_transport_error", error=repr(exc))
            return StoreResult(
                error=StoreError(
                    message=str(exc) or type(exc).__name__,
                    code=type(exc).__name__,
                )
            )

        data = response.data
        if isinstance(data, dict):
            data = [data]
        return StoreResult(data=data or [], count=response.count)

    async def ping(self) -> bool:
        """Check the store answers on its REST root."""
        try:
            response = await self._postgrest.session.get("/")
        except httpx.HTTPError:
            return False
        return response.status_code < 500
