# API routers
from .revenue import router as revenue_router
from .dashboard import router as dashboard_router
from .invoices import router as invoices_router
from .invoices import query_router as invoice_query_router
from .customers import router as customers_router

__all__ = [
    "revenue_router",
    "dashboard_router",
    "invoices_router",
    "invoice_query_router",
    "customers_router",
]
