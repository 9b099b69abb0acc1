"""
Pydantic models for the dashboard summary cards.

The JSON keys are camelCase because the cards component reads them as-is.
"""
from pydantic import BaseModel, ConfigDict, Field


class CardData(BaseModel):
    """Counts and formatted paid/pending totals."""

    model_config = ConfigDict(populate_by_name=True)

    number_of_customers: int = Field(0, alias="numberOfCustomers")
    number_of_invoices: int = Field(0, alias="numberOfInvoices")
    total_paid_invoices: str = Field(..., alias="totalPaidInvoices")
    total_pending_invoices: str = Field(..., alias="totalPendingInvoices")
