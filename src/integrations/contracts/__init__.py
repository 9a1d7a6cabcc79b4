"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- Product catalogue entries built from spreadsheet rows
- Payment preference request/response formats
- Webhook notification payloads

Both mock and real clients should use these contracts.
"""
