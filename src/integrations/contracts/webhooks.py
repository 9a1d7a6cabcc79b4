"""
Webhook contracts.

Shape of the notifications Mercado Pago posts to /webhook_mp and the
interface for whatever should happen after a payment notification is
accepted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class WebhookData(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None


class WebhookEvent(BaseModel):
    """Notification body. Unknown fields are kept but ignored."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    action: Optional[str] = None
    data: Optional[WebhookData] = None

    @property
    def is_payment(self) -> bool:
        return self.type == "payment"

    @property
    def payment_id(self) -> Optional[Any]:
        return self.data.id if self.data is not None else None

    @classmethod
    def from_body(cls, body: Any) -> "WebhookEvent":
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)


class PaymentNotificationHandler(ABC):
    """
    Extension point for accepted payment notifications.

    Implementations receive the parsed event after the shared secret has been
    verified. Exceptions raised here are logged by the webhook endpoint and
    never change the acknowledgement sent to the provider.
    """

    @abstractmethod
    async def handle_payment(self, event: WebhookEvent) -> None:
        """Process a notification whose type is "payment"."""


__all__ = ["PaymentNotificationHandler", "WebhookData", "WebhookEvent"]
