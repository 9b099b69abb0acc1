"""Dashboard summary cards service."""
from __future__ import annotations

import asyncio

import structlog

from ..config.constants import INVOICE_STATUS_PAID, INVOICE_STATUS_PENDING
from ..helpers.invoice_helpers import format_currency, sum_amounts
from ..store import StoreClient
from .base_service import BaseService, fetch_guard

logger = structlog.get_logger("acme.services.dashboard")


class DashboardService(BaseService):
    """Aggregates for the four summary cards."""

    @fetch_guard("Failed to fetch card data.")
    async def fetch_card_data(self, store: StoreClient) -> dict:
        """
        Invoice/customer counts and paid/pending totals.

        The four reads are independent and issued together. All of them
        finish before any result is used, and the cards fail as a whole if
        any read failed.
        """
        branches = {
            "invoice_count": self._execute_count(
                store, store.table("invoices").select("*", count="exact", head=True)
            ),
            "customer_count": self._execute_count(
                store, store.table("customers").select("*", count="exact", head=True)
            ),
            "paid": self._execute_many(
                store, store.table("invoices").select("amount").eq("status", INVOICE_STATUS_PAID)
            ),
            "pending": self._execute_many(
                store, store.table("invoices").select("amount").eq("status", INVOICE_STATUS_PENDING)
            ),
        }
        outcomes = dict(zip(branches, await asyncio.gather(*branches.values(), return_exceptions=True)))

        failed = {name: repr(value) for name, value in outcomes.items() if isinstance(value, BaseException)}
        if failed:
            logger.error("card_data_branches_failed", branches=failed)
            # Re-raise the first failure so it is classified like any other read
            raise next(value for value in outcomes.values() if isinstance(value, BaseException))

        return {
            "number_of_customers": outcomes["customer_count"],
            "number_of_invoices": outcomes["invoice_count"],
            "total_paid_invoices": format_currency(sum_amounts(outcomes["paid"])),
            "total_pending_invoices": format_currency(sum_amounts(outcomes["pending"])),
        }


# Singleton instance for router use
dashboard_service = DashboardService()
