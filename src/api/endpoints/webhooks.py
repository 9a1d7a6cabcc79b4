import hmac
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_notification_handler, get_settings
from src.integrations.contracts.webhooks import PaymentNotificationHandler, WebhookEvent
from src.utils.config_loader import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook_mp", tags=["Webhooks"], response_class=PlainTextResponse)
async def mercadopago_webhook(
    request: Request,
    secret: Optional[str] = Query(default=None),
    settings: Settings = Depends(get_settings),
    handler: PaymentNotificationHandler = Depends(get_notification_handler),
):
    """
    Mercado Pago notification receiver.
    - Rejects calls whose ?secret= does not match MP_WEBHOOK_SECRET.
    - Logs payment notifications and hands them to the notification handler.
    - Always acknowledges accepted calls so the provider stops retrying.
    """
    if not _secret_matches(secret, settings.mercado_pago.webhook_secret):
        logger.warning("Webhook received with invalid secret.")
        return PlainTextResponse("Acesso negado.", status_code=403)

    try:
        event = WebhookEvent.from_body(await request.json())
    except Exception as e:
        logger.warning("Ignoring webhook with unreadable body: %s", e)
        return PlainTextResponse("Webhook recebido.", status_code=200)

    if event.is_payment:
        logger.info(f"Payment webhook received for id: {event.payment_id}")
        try:
            await handler.handle_payment(event)
        except Exception as e:
            logger.error(f"Error processing webhook: {str(e)}", exc_info=True)

    return PlainTextResponse("Webhook recebido.", status_code=200)


def _secret_matches(candidate: Optional[str], expected: str) -> bool:
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
