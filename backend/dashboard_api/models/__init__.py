# Pydantic models for API request/response
from .common import ErrorBody, ErrorResponse
from .revenue import Revenue
from .invoice import (
    LatestInvoice,
    InvoiceTableRow,
    InvoicePagesResponse,
    InvoiceForm,
    InvoiceAmountMatch,
)
from .customer import CustomerField, CustomersTableRow
from .dashboard import CardData

__all__ = [
    "ErrorBody",
    "ErrorResponse",
    "Revenue",
    "LatestInvoice",
    "InvoiceTableRow",
    "InvoicePagesResponse",
    "InvoiceForm",
    "InvoiceAmountMatch",
    "CustomerField",
    "CustomersTableRow",
    "CardData",
]
