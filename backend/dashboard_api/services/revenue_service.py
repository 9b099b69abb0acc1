"""Revenue domain service."""
from __future__ import annotations

import structlog

from ..store import StoreClient
from .base_service import BaseService, fetch_guard

logger = structlog.get_logger("acme.services.revenue")


class RevenueService(BaseService):
    """Business logic for the revenue chart."""

    @fetch_guard("Failed to fetch revenue data.")
    async def fetch_revenue(self, store: StoreClient) -> list[dict]:
        """All revenue rows, in store order."""
        logger.debug("fetching_revenue")
        return await self._execute_many(store, store.table("revenue").select("*"))


# Singleton instance for router use
revenue_service = RevenueService()
