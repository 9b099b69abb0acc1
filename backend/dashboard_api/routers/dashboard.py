"""API router for the dashboard summary cards."""
from fastapi import APIRouter, Depends

from ..dependencies import get_store
from ..models.dashboard import CardData
from ..services.dashboard_service import dashboard_service
from ..store import StoreClient

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/cards", response_model=CardData)
async def get_card_data(store: StoreClient = Depends(get_store)):
    """
    Summary card values.

    Returns:
        - numberOfInvoices / numberOfCustomers: exact counts
        - totalPaidInvoices / totalPendingInvoices: formatted currency totals
    """
    data = await dashboard_service.fetch_card_data(store)
    return CardData(**data)
