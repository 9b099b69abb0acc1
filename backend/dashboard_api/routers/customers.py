"""API router for customer endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_store
from ..models.customer import CustomerField, CustomersTableRow
from ..services.customer_service import customer_service
from ..store import StoreClient

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerField])
async def list_customers(store: StoreClient = Depends(get_store)):
    """All customers as id/name pairs, ordered by name."""
    return await customer_service.fetch_customers(store)


@router.get("/table", response_model=List[CustomersTableRow])
async def customers_table(
    query: str = Query("", description="Match customer name or email"),
    store: StoreClient = Depends(get_store),
):
    """
    Customers matching the query with invoice count and pending/paid totals.

    A customer whose invoices could not be read is listed with zero totals.
    """
    return await customer_service.fetch_filtered_customers(store, query)
