"""Request-scoped accessors for the clients built by create_app()."""

from fastapi import Request

from src.integrations.contracts.interfaces import PaymentPreferenceClient
from src.integrations.contracts.webhooks import PaymentNotificationHandler
from src.integrations.policy.catalog_service import ProductCatalogService
from src.utils.config_loader import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> ProductCatalogService:
    return request.app.state.catalog


def get_payments_client(request: Request) -> PaymentPreferenceClient:
    return request.app.state.payments_client


def get_notification_handler(request: Request) -> PaymentNotificationHandler:
    return request.app.state.notification_handler
