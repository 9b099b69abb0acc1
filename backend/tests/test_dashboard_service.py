"""
Tests for the summary card aggregates and the revenue read.
"""
import pytest

from dashboard_api.middleware.error_handler import StoreUnavailableError
from dashboard_api.services.dashboard_service import dashboard_service
from dashboard_api.services.revenue_service import revenue_service
from fake_postgrest import FakePostgrest

pytestmark = pytest.mark.anyio


class TestCardData:
    """Tests for fetch_card_data."""

    async def test_seed_totals(self, store):
        data = await dashboard_service.fetch_card_data(store)
        assert data == {
            "number_of_customers": 4,
            "number_of_invoices": 14,
            "total_paid_invoices": "$1,006.26",
            "total_pending_invoices": "$1,298.74",
        }

    async def test_totals_do_not_depend_on_customers(self):
        fake = FakePostgrest({
            "customers": [{"id": f"c{n}", "name": f"Customer {n}"} for n in range(7)],
            "invoices": [
                {"id": "a", "customer_id": "c0", "amount": 500, "status": "paid"},
                {"id": "b", "customer_id": "c1", "amount": 300, "status": "pending"},
                {"id": "c", "customer_id": "c2", "amount": 200, "status": "paid"},
            ],
        })
        async with fake.client() as client:
            data = await dashboard_service.fetch_card_data(client)
        assert data["total_paid_invoices"] == "$7.00"
        assert data["total_pending_invoices"] == "$3.00"
        assert data["number_of_invoices"] == 3
        assert data["number_of_customers"] == 7

    async def test_empty_store(self):
        fake = FakePostgrest({"customers": [], "invoices": []})
        async with fake.client() as client:
            data = await dashboard_service.fetch_card_data(client)
        assert data == {
            "number_of_customers": 0,
            "number_of_invoices": 0,
            "total_paid_invoices": "$0.00",
            "total_pending_invoices": "$0.00",
        }

    async def test_counts_use_head_requests(self, fake_store, store):
        await dashboard_service.fetch_card_data(store)
        heads = [r for r in fake_store.requests if r.method == "HEAD"]
        assert sorted(r.url.path for r in heads) == ["/rest/v1/customers", "/rest/v1/invoices"]
        assert all(r.headers["prefer"] == "count=exact" for r in heads)

    async def test_any_branch_failure_fails_all(self, fake_store, store):
        fake_store.fail("customers")
        with pytest.raises(StoreUnavailableError) as exc_info:
            await dashboard_service.fetch_card_data(store)
        assert exc_info.value.message == "Failed to fetch card data."
        # every branch was still issued
        assert len(fake_store.requests) == 4

    async def test_pending_branch_failure(self, fake_store, store):
        fake_store.fail_transport("invoices", when=lambda params: params.get("status") == "eq.pending")
        with pytest.raises(StoreUnavailableError, match="Failed to fetch card data."):
            await dashboard_service.fetch_card_data(store)


class TestRevenue:
    """Tests for fetch_revenue."""

    async def test_rows_as_stored(self, store):
        rows = await revenue_service.fetch_revenue(store)
        assert rows == [
            {"month": "Jan", "revenue": 2000},
            {"month": "Feb", "revenue": 1800},
            {"month": "Mar", "revenue": 2200},
        ]

    async def test_empty(self):
        fake = FakePostgrest({"revenue": []})
        async with fake.client() as client:
            assert await revenue_service.fetch_revenue(client) == []

    async def test_store_failure(self, fake_store, store):
        fake_store.fail("revenue")
        with pytest.raises(StoreUnavailableError) as exc_info:
            await revenue_service.fetch_revenue(store)
        assert exc_info.value.message == "Failed to fetch revenue data."
        assert exc_info.value.status_code == 503
