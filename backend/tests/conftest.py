"""
Pytest fixtures for API and service tests.
"""
import pytest
from fastapi.testclient import TestClient

from dashboard_api.dependencies import get_store
from dashboard_api.main import app
from fake_postgrest import FakePostgrest

CUSTOMERS = [
    {"id": "c1", "name": "Acme Corp", "email": "billing@acme.com", "image_url": "/customers/acme.png"},
    {"id": "c2", "name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba.png"},
    {"id": "c3", "name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee.png"},
    {"id": "c4", "name": "Zed Nobody", "email": "zed@nobody.com", "image_url": "/customers/zed.png"},
]

INVOICES = [
    {"id": "i01", "customer_id": "c1", "amount": 15795, "status": "pending", "date": "2022-12-06"},
    {"id": "i02", "customer_id": "c2", "amount": 20348, "status": "pending", "date": "2022-11-14"},
    {"id": "i03", "customer_id": "c3", "amount": 3040, "status": "paid", "date": "2022-10-29"},
    {"id": "i04", "customer_id": "c1", "amount": 44800, "status": "paid", "date": "2023-09-10"},
    {"id": "i05", "customer_id": "c2", "amount": 34577, "status": "pending", "date": "2023-08-05"},
    {"id": "i06", "customer_id": "c3", "amount": 54246, "status": "pending", "date": "2023-07-16"},
    {"id": "i07", "customer_id": "c1", "amount": 666, "status": "pending", "date": "2023-06-27"},
    {"id": "i08", "customer_id": "c2", "amount": 32545, "status": "paid", "date": "2023-06-09"},
    {"id": "i09", "customer_id": "c3", "amount": 1250, "status": "paid", "date": "2023-06-17"},
    {"id": "i10", "customer_id": "c1", "amount": 8546, "status": "paid", "date": "2023-06-07"},
    {"id": "i11", "customer_id": "c2", "amount": 500, "status": "paid", "date": "2023-08-19"},
    {"id": "i12", "customer_id": "c3", "amount": 8945, "status": "paid", "date": "2023-06-03"},
    {"id": "i13", "customer_id": "c1", "amount": 1000, "status": "paid", "date": "2022-06-05"},
    {"id": "i14", "customer_id": "c9", "amount": 4242, "status": "pending", "date": "2023-01-01"},
]

REVENUE = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
    {"month": "Mar", "revenue": 2200},
]


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def fake_store():
    """Fake store seeded with customers, invoices and revenue."""
    return FakePostgrest({
        "customers": CUSTOMERS,
        "invoices": INVOICES,
        "revenue": REVENUE,
    })


@pytest.fixture
async def store(fake_store):
    """Store client wired to the fake store."""
    async with fake_store.client() as client:
        yield client


@pytest.fixture
def client(fake_store):
    """Test client for the FastAPI app, reading from the fake store."""

    async def _fake_get_store():
        async with fake_store.client() as store:
            yield store

    app.dependency_overrides[get_store] = _fake_get_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="module")
def base_url():
    """Base URL for API v1 endpoints."""
    return "/api/v1"
