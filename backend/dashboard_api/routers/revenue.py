"""API router for the revenue chart."""
from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_store
from ..models.revenue import Revenue
from ..services.revenue_service import revenue_service
from ..store import StoreClient

router = APIRouter(prefix="/revenue", tags=["revenue"])


@router.get("", response_model=List[Revenue])
async def get_revenue(store: StoreClient = Depends(get_store)):
    """Monthly revenue rows as stored (unordered)."""
    return await revenue_service.fetch_revenue(store)
