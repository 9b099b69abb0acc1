"""
Invoice domain service.

Handles the latest-invoices card, the searchable invoice table and its page
count, and the single-invoice lookup used by the edit form.
"""
from __future__ import annotations

from typing import Any

import structlog

from ..config.constants import ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT
from ..helpers.invoice_helpers import (
    cents_to_decimal,
    customer_fields,
    format_currency,
    invoice_matches,
)
from ..middleware.error_handler import StoreUnavailableError
from ..store import StoreClient
from .base_service import BaseService, fetch_guard
from .pagination import count_pages, paginate_rows

logger = structlog.get_logger("acme.services.invoice")

INVOICE_TABLE_COLUMNS = "id, amount, date, status, customer_id, customers(name, email, image_url)"
INVOICE_SEARCH_COLUMNS = "id, amount, date, status, customers(name, email)"


class InvoiceService(BaseService):
    """Business logic for invoice queries."""

    @fetch_guard("Failed to fetch the latest invoices.")
    async def fetch_latest_invoices(self, store: StoreClient) -> list[dict]:
        """Most recent invoices by date with the customer flattened in."""
        query = (
            store.table("invoices")
            .select("id, amount, date, customers(name, email, image_url)")
            .order("date", desc=True)
            .limit(LATEST_INVOICES_LIMIT)
        )
        rows = await self._execute_many(store, query)
        return [
            {
                "id": row["id"],
                **customer_fields(row),
                "amount": format_currency(row["amount"]),
            }
            for row in rows
        ]

    @fetch_guard("Failed to fetch invoices.")
    async def fetch_filtered_invoices(
        self,
        store: StoreClient,
        query: str,
        current_page: int,
    ) -> list[dict]:
        """
        One page of invoices matching the search query, newest first.

        The store cannot OR across the embedded customer relation, so every
        invoice is read (date descending), filtered here, then paginated.
        Filtering always happens before the page is cut.
        """
        request = (
            store.table("invoices")
            .select(INVOICE_TABLE_COLUMNS)
            .order("date", desc=True)
        )
        rows = await self._execute_many(store, request)
        matching = [row for row in rows if invoice_matches(row, query)]
        page = paginate_rows(matching, current_page, ITEMS_PER_PAGE)
        return [self._map_invoice_row(row) for row in page]

    @staticmethod
    def _map_invoice_row(row: dict) -> dict:
        """Map an invoice row with embedded customer to the table shape."""
        return {
            "id": row["id"],
            "customer_id": row.get("customer_id"),
            "amount": row.get("amount"),
            "date": row.get("date"),
            "status": row.get("status"),
            **customer_fields(row),
        }

    @fetch_guard("Failed to fetch total number of invoices.")
    async def fetch_invoices_pages(self, store: StoreClient, query: str) -> int:
        """Total pages for a search, using the same predicate as the table."""
        rows = await self._execute_many(store, store.table("invoices").select(INVOICE_SEARCH_COLUMNS))
        matches = sum(1 for row in rows if invoice_matches(row, query))
        return count_pages(matches, ITEMS_PER_PAGE)

    @fetch_guard("Failed to fetch invoice.")
    async def fetch_invoice_by_id(self, store: StoreClient, invoice_id: str) -> dict | None:
        """
        Invoice for the edit form, amount converted from cents to a decimal.

        Returns None when no invoice has this id; only a failed read raises.
        """
        query = (
            store.table("invoices")
            .select("id, customer_id, amount, status")
            .eq("id", invoice_id)
        )
        row = await self._execute_one(store, query)
        if row is None:
            return None
        return {**row, "amount": cents_to_decimal(row["amount"])}

    async def list_invoices_by_amount(self, store: StoreClient, amount: int) -> list[dict[str, Any]]:
        """Invoices with an exact amount in cents, with the customer name.

        Store errors are surfaced with the store's own message.
        """
        query = (
            store.table("invoices")
            .select("amount, customers(name)")
            .eq("amount", amount)
        )
        result = await store.execute(query)
        if result.error is not None:
            logger.error("database_error", operation="list_invoices_by_amount", error=result.error.message)
            raise StoreUnavailableError(result.error.message)
        return [
            {"amount": row.get("amount"), "name": customer_fields(row)["name"]}
            for row in result.data or []
        ]


# Singleton instance for router use
invoice_service = InvoiceService()
