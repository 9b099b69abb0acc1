"""
Pydantic models for invoice endpoints.
"""
from typing import Optional

from pydantic import BaseModel, Field


class LatestInvoice(BaseModel):
    """Row of the latest-invoices card. Amount is a formatted currency string."""
    id: str
    name: str = ""
    email: str = ""
    image_url: str = ""
    amount: str = Field(description="Formatted amount, e.g. $1,234.56")


class InvoiceTableRow(BaseModel):
    """Row of the searchable invoice table."""
    id: str
    customer_id: Optional[str] = None
    amount: Optional[int] = Field(None, description="Amount in cents")
    date: Optional[str] = None
    status: Optional[str] = None
    name: str = ""
    email: str = ""
    image_url: str = ""


class InvoicePagesResponse(BaseModel):
    """Page count for an invoice search."""
    total_pages: int = Field(..., ge=0)


class InvoiceForm(BaseModel):
    """Invoice as loaded into the edit form. Amount is in currency units."""
    id: str
    customer_id: Optional[str] = None
    amount: float = Field(description="Amount in currency units (cents / 100)")
    status: Optional[str] = None


class InvoiceAmountMatch(BaseModel):
    """Invoice amount with its customer's name."""
    amount: int
    name: str = ""
