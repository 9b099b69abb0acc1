"""
Invoice API endpoints.

Latest invoices card, searchable invoice table with page count, and the
single-invoice lookup for the edit form.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Query

from ..dependencies import get_store
from ..middleware.error_handler import NotFoundError
from ..models.invoice import (
    InvoiceAmountMatch,
    InvoiceForm,
    InvoicePagesResponse,
    InvoiceTableRow,
    LatestInvoice,
)
from ..services.invoice_service import invoice_service
from ..store import StoreClient

router = APIRouter(prefix="/invoices", tags=["invoices"])

# Exact-amount lookup, mounted outside /invoices
query_router = APIRouter(tags=["invoices"])


@router.get("", response_model=List[InvoiceTableRow])
async def list_invoices(
    query: str = Query("", description="Search name, email, amount (cents), date or status"),
    page: int = Query(1, ge=1, description="Page number (1-indexed, 6 rows per page)"),
    store: StoreClient = Depends(get_store),
):
    """
    One page of the invoice table, newest first.

    Use /invoices/pages with the same query to get the valid page range.
    """
    return await invoice_service.fetch_filtered_invoices(store, query, page)


@router.get("/latest", response_model=List[LatestInvoice])
async def list_latest_invoices(store: StoreClient = Depends(get_store)):
    """The five most recent invoices with formatted amounts."""
    return await invoice_service.fetch_latest_invoices(store)


@router.get("/pages", response_model=InvoicePagesResponse)
async def count_invoice_pages(
    query: str = Query("", description="Same search as /invoices"),
    store: StoreClient = Depends(get_store),
):
    """Total pages for an invoice search."""
    total_pages = await invoice_service.fetch_invoices_pages(store, query)
    return InvoicePagesResponse(total_pages=total_pages)


@router.get("/{invoice_id}", response_model=InvoiceForm)
async def get_invoice(
    invoice_id: str = Path(..., min_length=1, description="Invoice id"),
    store: StoreClient = Depends(get_store),
):
    """Invoice for the edit form (amount in currency units)."""
    invoice = await invoice_service.fetch_invoice_by_id(store, invoice_id)
    if invoice is None:
        raise NotFoundError(f"Invoice {invoice_id} not found")
    return invoice


@query_router.get("/query", response_model=List[InvoiceAmountMatch])
async def query_invoices_by_amount(
    amount: int = Query(666, description="Exact amount in cents"),
    store: StoreClient = Depends(get_store),
):
    """Invoices with an exact amount, with the customer name."""
    return await invoice_service.list_invoices_by_amount(store, amount)
