"""
Real HTTP integration clients.

These clients communicate with the external systems the store depends on:
- Google Sheets API (product catalogue rows)
- Mercado Pago API (checkout preferences)

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients should happen in src/api/main.py only.
"""
