"""
Service layer for the dashboard API.

Domain services encapsulate store reads, client-side filtering and
aggregation, and currency formatting. Routers stay thin:
parse request → call service → return response.
"""
from .revenue_service import revenue_service
from .invoice_service import invoice_service
from .customer_service import customer_service
from .dashboard_service import dashboard_service

__all__ = [
    "revenue_service",
    "invoice_service",
    "customer_service",
    "dashboard_service",
]
