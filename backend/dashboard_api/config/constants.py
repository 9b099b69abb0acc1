"""
Centralized constants for the dashboard backend.

The UI relies on these values; change them together with the frontend.
"""
import os

# Invoice table pagination (1-based pages, offset = (page - 1) * ITEMS_PER_PAGE)
ITEMS_PER_PAGE = 6

# Rows shown in the "Latest Invoices" card
LATEST_INVOICES_LIMIT = 5

# Invoice statuses; any other value counts toward neither total
INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"

# Display currency (amounts are stored as integer cents)
CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "$")
