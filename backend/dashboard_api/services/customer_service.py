"""
Customer domain service.

Handles the customer picker list and the customer table with per-customer
invoice totals.
"""
from __future__ import annotations

import asyncio

import structlog

from ..config.constants import INVOICE_STATUS_PAID, INVOICE_STATUS_PENDING
from ..helpers.invoice_helpers import format_currency, sum_amounts
from ..store import StoreClient, ilike_any
from .base_service import BaseService, StoreQueryError, fetch_guard

logger = structlog.get_logger("acme.services.customer")

EMPTY_TOTALS = {"total_invoices": 0, "total_pending": 0, "total_paid": 0}


class CustomerService(BaseService):
    """Business logic for customer queries."""

    @fetch_guard("Failed to fetch all customers.")
    async def fetch_customers(self, store: StoreClient) -> list[dict]:
        """All customers as id/name pairs, ordered by name."""
        query = (
            store.table("customers")
            .select("id, name")
            .order("name")
        )
        return await self._execute_many(store, query)

    @fetch_guard("Failed to fetch customer table.")
    async def fetch_filtered_customers(self, store: StoreClient, query: str) -> list[dict]:
        """
        Customers whose name or email contains the query, with invoice totals.

        The name/email filter runs in the store and is always sent, so an
        empty query still drops customers with neither a name nor an email.
        Totals need one invoice read per customer; those reads run
        concurrently and a read the store rejects leaves that customer's
        totals at zero without affecting the others.
        """
        request = (
            store.table("customers")
            .select("id, name, email, image_url")
            .or_(ilike_any(["name", "email"], query))
            .order("name")
        )
        customers = await self._execute_many(store, request)

        totals = await asyncio.gather(
            *(self._customer_totals(store, customer["id"]) for customer in customers),
            return_exceptions=True,
        )

        # Only store failures are isolated; anything else is a bug in shaping
        for stats in totals:
            if isinstance(stats, BaseException) and not isinstance(stats, StoreQueryError):
                raise stats

        rows = []
        for customer, stats in zip(customers, totals):
            if isinstance(stats, StoreQueryError):
                logger.warning(
                    "customer_totals_failed",
                    customer_id=customer["id"],
                    error=stats.error.message,
                    code=stats.error.code,
                )
                stats = EMPTY_TOTALS
            rows.append({
                "id": customer["id"],
                "name": customer.get("name"),
                "email": customer.get("email"),
                "image_url": customer.get("image_url"),
                "total_invoices": stats["total_invoices"],
                "total_pending": format_currency(stats["total_pending"]),
                "total_paid": format_currency(stats["total_paid"]),
            })
        return rows

    async def _customer_totals(self, store: StoreClient, customer_id: str) -> dict:
        """Invoice count plus pending/paid sums (cents) for one customer."""
        query = (
            store.table("invoices")
            .select("id, amount, status")
            .eq("customer_id", customer_id)
        )
        invoices = await self._execute_many(store, query)
        return {
            "total_invoices": len(invoices),
            "total_pending": sum_amounts(invoices, INVOICE_STATUS_PENDING),
            "total_paid": sum_amounts(invoices, INVOICE_STATUS_PAID),
        }


# Singleton instance for router use
customer_service = CustomerService()
