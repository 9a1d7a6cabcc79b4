"""
FastAPI application - Main entry point

Run with:
  uvicorn src.api.main:create_app --factory --host 0.0.0.0 --port 3000
or:
  python scripts/run_server.py
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.endpoints.health import SERVICE_VERSION
from src.api.endpoints.health import router as health_router
from src.api.endpoints.payments import payments_api
from src.api.endpoints.products import router as products_router
from src.api.endpoints.webhooks import router as webhooks_router
from src.integrations.contracts.interfaces import PaymentPreferenceClient, SpreadsheetRowSource
from src.integrations.contracts.webhooks import PaymentNotificationHandler
from src.integrations.policy.catalog_service import ProductCatalogService
from src.integrations.policy.payment_notifications import LoggingPaymentNotificationHandler
from src.utils.config_loader import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    sheets_client: Optional[SpreadsheetRowSource] = None,
    payments_client: Optional[PaymentPreferenceClient] = None,
    notification_handler: Optional[PaymentNotificationHandler] = None,
) -> FastAPI:
    """
    Build the application with its integration clients.

    Clients that are not passed in are built from settings: in-memory mocks
    when INTEGRATIONS_MODE=mock, real Google Sheets / Mercado Pago otherwise.
    Configuration errors propagate, so a misconfigured process never starts.
    """
    if settings is None:
        settings = load_settings()

    logging.basicConfig(level=settings.log_level)

    # ============================================================================
    # DEPENDENCY INJECTION
    # ============================================================================
    if sheets_client is None:
        sheets_client = _build_sheets_client(settings)
    if payments_client is None:
        payments_client = _build_payments_client(settings)
    if notification_handler is None:
        notification_handler = LoggingPaymentNotificationHandler()

    app = FastAPI(
        title="Loja da Profe API",
        description="Product catalogue and Mercado Pago checkout for the store frontend",
        version=SERVICE_VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.catalog = ProductCatalogService(sheets_client, settings.google.products_spreadsheet_id)
    app.state.payments_client = payments_client
    app.state.notification_handler = notification_handler

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(payments_api)
    app.include_router(webhooks_router)

    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    logger.info(
        "Store API configured (sheets=%s, payments=%s)",
        type(sheets_client).__name__,
        type(payments_client).__name__,
    )
    return app


def _build_sheets_client(settings: Settings) -> SpreadsheetRowSource:
    if settings.use_mock_integrations:
        from src.integrations.clients.mocks.google_sheets import MockSheetsClient

        return MockSheetsClient()

    from src.integrations.clients.real_http.google_sheets import GoogleSheetsClient

    return GoogleSheetsClient(
        service_account_email=settings.google.service_account_email,
        private_key=settings.google.private_key,
    )


def _build_payments_client(settings: Settings) -> PaymentPreferenceClient:
    if settings.use_mock_integrations:
        from src.integrations.clients.mocks.mercadopago import MockMercadoPagoClient

        return MockMercadoPagoClient()

    from src.integrations.clients.real_http.mercadopago import MercadoPagoClient

    return MercadoPagoClient(
        access_token=settings.mercado_pago.access_token,
        base_url=settings.mercado_pago.api_base_url,
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client input errors, reported as 400 like missing items.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Requisição inválida.", "errors": jsonable_encoder(exc.errors())},
    )
