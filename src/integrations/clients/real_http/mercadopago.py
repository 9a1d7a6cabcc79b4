"""
Mercado Pago HTTP Client.

Creates checkout preferences through the Mercado Pago REST API using the
account access token as a bearer credential.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.interfaces import (
    PaymentPreferenceClient,
    PreferenceRequest,
    PreferenceResponse,
)
from src.integrations.contracts.payments import preference_to_payload
from src.integrations.policy.response_wrappers import PaymentProviderError, normalize_preference_response

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.mercadopago.com"
PREFERENCES_PATH = "/checkout/preferences"


class MercadoPagoClient(PaymentPreferenceClient):
    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not access_token:
            raise PaymentProviderError("Mercado Pago access token is not configured.")
        self.access_token = access_token
        self.base_url = (base_url or DEFAULT_API_BASE_URL).rstrip("/")
        self.transport = transport

    async def create_preference(self, request: PreferenceRequest) -> PreferenceResponse:
        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.access_token}",
        }
        payload: Dict[str, Any] = preference_to_payload(request)
        url = f"{self.base_url}{PREFERENCES_PATH}"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content else {}
        except httpx.HTTPStatusError as e:
            body = _safe_json(e.response)
            logger.error("Mercado Pago rejected preference: %s %s", e.response.status_code, body)
            raise PaymentProviderError(
                f"Mercado Pago returned HTTP {e.response.status_code}",
                payload=body,
            ) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to Mercado Pago: %s", e)
            raise PaymentProviderError(f"Could not reach Mercado Pago: {e}") from e
        except ValueError as e:
            raise PaymentProviderError(f"Mercado Pago sent a non-JSON response: {e}") from e

        preference = normalize_preference_response(data)
        logger.info("Created Mercado Pago preference %s", preference.id)
        return preference


def _safe_json(response: httpx.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {"body": response.text}
    return data if isinstance(data, dict) else {"body": data}
