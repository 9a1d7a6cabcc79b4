"""
Integrations layer.
This package contains all code used to communicate with external systems:
- Google Sheets (product catalogue rows)
- Mercado Pago (checkout preferences and payment webhooks)

Key rule:
- API endpoints MUST NOT call external APIs directly.
- Endpoints call integration clients (under src/integrations/clients) through
  the services in src/integrations/policy.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/main.py).
"""

from .contracts.interfaces import (
    BackUrls,
    Payer,
    PaymentPreferenceClient,
    PreferenceItem,
    PreferenceRequest,
    PreferenceResponse,
    SpreadsheetRowSource,
)
from .contracts.payments import preference_to_payload
from .contracts.product_catalogues import PLACEHOLDER_IMAGE_URL, Product
from .contracts.webhooks import PaymentNotificationHandler, WebhookEvent

__all__ = [
    # interfaces
    "BackUrls", "Payer", "PaymentPreferenceClient", "PreferenceItem",
    "PreferenceRequest", "PreferenceResponse", "SpreadsheetRowSource",
    # payments
    "preference_to_payload",
    # products
    "PLACEHOLDER_IMAGE_URL", "Product",
    # webhooks
    "PaymentNotificationHandler", "WebhookEvent",
]
