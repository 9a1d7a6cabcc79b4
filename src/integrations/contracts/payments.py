from typing import Any, Dict

from .interfaces import PreferenceItem, PreferenceRequest

"""
Payment preference contract.

Converts PreferenceRequest objects into the JSON body expected by the
Mercado Pago preferences endpoint. Both the real HTTP client and the mock
client build their payload here so the shape is identical everywhere.
"""


def item_to_payload(item: PreferenceItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "quantity": item.quantity,
        "unit_price": item.unit_price,
        "currency_id": item.currency_id,
    }


def preference_to_payload(request: PreferenceRequest) -> Dict[str, Any]:
    """Return the provider request body for a PreferenceRequest."""
    payload: Dict[str, Any] = {
        "items": [item_to_payload(item) for item in request.items],
        "back_urls": {
            "success": request.back_urls.success,
            "failure": request.back_urls.failure,
            "pending": request.back_urls.pending,
        },
        "auto_return": request.auto_return,
        "notification_url": request.notification_url,
    }
    if request.payer is not None:
        payload["payer"] = {"name": request.payer.name, "email": request.payer.email}
    return payload

