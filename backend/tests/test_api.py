"""
Tests for the HTTP surface: routes, response shapes and error envelopes.
"""
import httpx
from fastapi.testclient import TestClient

from dashboard_api import dependencies
from dashboard_api.dependencies import get_store
from dashboard_api.main import app
from fake_postgrest import store_for


class TestHealthCheck:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Test health check reports a connected store."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["store"] == {"status": "connected"}
        assert "version" in data
        assert "uptime_seconds" in data

    def test_health_check_store_down(self, client):
        """An unreachable store turns the health check into a 503."""

        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        async def _down_store():
            async with store_for(refuse) as store:
                yield store

        app.dependency_overrides[get_store] = _down_store
        response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unavailable"
        assert data["store"]["status"] == "unreachable"

    def test_unconfigured_store(self, monkeypatch):
        """Without store settings the health check answers 503."""
        monkeypatch.setattr(dependencies, "STORE_URL", "")
        app.dependency_overrides.clear()
        with TestClient(app) as unconfigured:
            response = unconfigured.get("/health")
        assert response.status_code == 503
        assert response.json()["error"] == {
            "code": "STORE_UNAVAILABLE",
            "message": "Store is not configured.",
            "details": None,
        }


class TestRoot:
    """Tests for root endpoint."""

    def test_root_returns_api_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert data["endpoints"]["cards"] == "/api/v1/dashboard/cards"

    def test_request_id_header(self, client):
        """Every response carries a request id."""
        response = client.get("/")
        assert len(response.headers["X-Request-ID"]) == 8

    def test_security_headers(self, client):
        response = client.get("/")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRevenue:
    """Tests for GET /revenue."""

    def test_revenue(self, client, base_url):
        response = client.get(f"{base_url}/revenue")
        assert response.status_code == 200
        assert response.json()[0] == {"month": "Jan", "revenue": 2000}

    def test_revenue_store_failure(self, client, base_url, fake_store):
        """A failed read returns the generic message, never the store's."""
        fake_store.fail("revenue", message="permission denied for table revenue")
        response = client.get(f"{base_url}/revenue")
        assert response.status_code == 503
        error = response.json()["error"]
        assert error["code"] == "STORE_UNAVAILABLE"
        assert error["message"] == "Failed to fetch revenue data."
        assert "permission" not in response.text


class TestDashboardCards:
    """Tests for GET /dashboard/cards."""

    def test_cards_use_camel_case(self, client, base_url):
        response = client.get(f"{base_url}/dashboard/cards")
        assert response.status_code == 200
        assert response.json() == {
            "numberOfCustomers": 4,
            "numberOfInvoices": 14,
            "totalPaidInvoices": "$1,006.26",
            "totalPendingInvoices": "$1,298.74",
        }

    def test_cards_fail_as_a_whole(self, client, base_url, fake_store):
        fake_store.fail_transport("customers")
        response = client.get(f"{base_url}/dashboard/cards")
        assert response.status_code == 503
        assert response.json()["error"]["message"] == "Failed to fetch card data."


class TestInvoices:
    """Tests for the invoice endpoints."""

    def test_latest(self, client, base_url):
        response = client.get(f"{base_url}/invoices/latest")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 5
        assert data[0]["amount"] == "$448.00"
        assert data[0]["name"] == "Acme Corp"

    def test_table_default_page(self, client, base_url):
        response = client.get(f"{base_url}/invoices")
        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_table_search_and_page(self, client, base_url):
        response = client.get(f"{base_url}/invoices?query=paid&page=2")
        assert response.status_code == 200
        assert [row["id"] for row in response.json()] == ["i03", "i13"]

    def test_table_invalid_page(self, client, base_url):
        response = client.get(f"{base_url}/invoices?page=0")
        assert response.status_code == 422

    def test_pages(self, client, base_url):
        response = client.get(f"{base_url}/invoices/pages?query=acme")
        assert response.status_code == 200
        assert response.json() == {"total_pages": 1}

    def test_pages_no_matches(self, client, base_url):
        response = client.get(f"{base_url}/invoices/pages?query=zzz")
        assert response.json() == {"total_pages": 0}

    def test_invoice_by_id(self, client, base_url):
        response = client.get(f"{base_url}/invoices/i04")
        assert response.status_code == 200
        assert response.json() == {"id": "i04", "customer_id": "c1", "amount": 448.0, "status": "paid"}

    def test_invoice_with_null_columns(self, client, base_url, fake_store):
        """Null customer_id or status still renders the edit form."""
        fake_store.tables["invoices"].append({"id": "x1", "customer_id": None, "amount": 100, "status": None})
        response = client.get(f"{base_url}/invoices/x1")
        assert response.status_code == 200
        assert response.json() == {"id": "x1", "customer_id": None, "amount": 1.0, "status": None}

    def test_invoice_not_found(self, client, base_url):
        response = client.get(f"{base_url}/invoices/nope")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_invoice_store_failure(self, client, base_url, fake_store):
        fake_store.fail("invoices")
        response = client.get(f"{base_url}/invoices/i04")
        assert response.status_code == 503
        assert response.json()["error"]["message"] == "Failed to fetch invoice."

    def test_query_by_amount_default(self, client, base_url):
        response = client.get(f"{base_url}/query")
        assert response.status_code == 200
        assert response.json() == [{"amount": 666, "name": "Acme Corp"}]

    def test_query_by_amount(self, client, base_url):
        response = client.get(f"{base_url}/query?amount=44800")
        assert response.json() == [{"amount": 44800, "name": "Acme Corp"}]


class TestCustomers:
    """Tests for the customer endpoints."""

    def test_list(self, client, base_url):
        response = client.get(f"{base_url}/customers")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == [
            "Acme Corp", "Delba de Oliveira", "Lee Robinson", "Zed Nobody",
        ]

    def test_list_with_null_name(self, client, base_url, fake_store):
        fake_store.tables["customers"].append({"id": "c5", "name": None, "email": "x@y.com"})
        response = client.get(f"{base_url}/customers")
        assert response.status_code == 200
        assert response.json()[-1] == {"id": "c5", "name": None}

    def test_table(self, client, base_url):
        response = client.get(f"{base_url}/customers/table?query=acme")
        assert response.status_code == 200
        assert response.json() == [{
            "id": "c1",
            "name": "Acme Corp",
            "email": "billing@acme.com",
            "image_url": "/customers/acme.png",
            "total_invoices": 5,
            "total_pending": "$164.61",
            "total_paid": "$543.46",
        }]

    def test_table_store_failure(self, client, base_url, fake_store):
        fake_store.fail("customers")
        response = client.get(f"{base_url}/customers/table")
        assert response.status_code == 503
        assert response.json()["error"]["message"] == "Failed to fetch customer table."
