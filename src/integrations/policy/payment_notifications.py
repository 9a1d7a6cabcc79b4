"""
Payment notification handling.

The store does not yet fetch payment details or record approved orders in
the orders spreadsheet. LoggingPaymentNotificationHandler is the default
PaymentNotificationHandler and only records that a notification arrived;
replace it in create_app() once order persistence exists.
"""

import logging

from src.integrations.contracts.webhooks import PaymentNotificationHandler, WebhookEvent

logger = logging.getLogger(__name__)


class LoggingPaymentNotificationHandler(PaymentNotificationHandler):
    async def handle_payment(self, event: WebhookEvent) -> None:
        # TODO: look up the payment by id and append approved payments to the orders spreadsheet.
        logger.info("Payment %s accepted; order processing is not implemented", event.payment_id)
