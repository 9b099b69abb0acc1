# Acme Dashboard API
"""
REST API over the hosted invoices/customers store.

Endpoints:
- GET /api/v1/revenue - Monthly revenue rows
- GET /api/v1/invoices/latest - Five most recent invoices
- GET /api/v1/dashboard/cards - Summary card aggregates
- GET /api/v1/invoices - Searchable, paginated invoice table
- GET /api/v1/invoices/pages - Page count for an invoice search
- GET /api/v1/invoices/{id} - Single invoice for the edit form
- GET /api/v1/customers - Customer id/name pairs
- GET /api/v1/customers/table - Customer table with invoice totals
"""
