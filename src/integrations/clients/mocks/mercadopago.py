"""
Mercado Pago — MOCK client.

Purpose:
- Provides a fake preference integration used for development/testing
- Does NOT make any network calls
- Records every request so tests can assert on what would have been sent
"""

import logging
import uuid
from typing import List, Optional

from src.integrations.contracts.interfaces import (
    PaymentPreferenceClient,
    PreferenceRequest,
    PreferenceResponse,
)
from src.integrations.contracts.payments import preference_to_payload

logger = logging.getLogger(__name__)


class MockMercadoPagoClient(PaymentPreferenceClient):
    """
    Mock preference client.

    Parameters
    ----------
    preference_id : str, optional
        Fixed id to return. A random one is generated per call otherwise.
    error : Exception, optional
        When set, create_preference raises it instead of answering.
    """

    def __init__(self, preference_id: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self.preference_id = preference_id
        self.error = error
        self.requests: List[PreferenceRequest] = []

    async def create_preference(self, request: PreferenceRequest) -> PreferenceResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        preference_id = self.preference_id or f"mock-{uuid.uuid4().hex[:12]}"
        raw = {
            **preference_to_payload(request),
            "id": preference_id,
            "init_point": f"https://www.mercadopago.com.br/checkout/v1/redirect?pref_id={preference_id}",
            "sandbox_init_point": f"https://sandbox.mercadopago.com.br/checkout/v1/redirect?pref_id={preference_id}",
        }
        logger.info("[MOCK MercadoPago] Created preference %s with %d item(s)", preference_id, len(request.items))
        return PreferenceResponse(
            id=preference_id,
            init_point=raw["init_point"],
            sandbox_init_point=raw["sandbox_init_point"],
            raw=raw,
        )
