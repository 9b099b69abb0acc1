"""
Pydantic models for customer endpoints.
"""
from typing import Optional

from pydantic import BaseModel, Field


class CustomerField(BaseModel):
    """Customer option for selection controls."""
    id: str
    name: Optional[str] = None


class CustomersTableRow(BaseModel):
    """Customer with invoice totals. Totals are formatted currency strings."""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    image_url: Optional[str] = None
    total_invoices: int = Field(0, ge=0)
    total_pending: str
    total_paid: str
