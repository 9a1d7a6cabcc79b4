"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- INTEGRATIONS_MODE=mock (local development without Google/Mercado Pago access)
- Tests exercise the HTTP layer end-to-end without network access

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to src/integrations/contracts/*
"""
