import logging
import math
from typing import Any, List, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.dependencies import get_payments_client, get_settings
from src.integrations.contracts.interfaces import (
    BackUrls,
    Payer,
    PaymentPreferenceClient,
    PreferenceItem,
    PreferenceRequest,
)
from src.utils.config_loader import Settings

logger = logging.getLogger(__name__)

api = APIRouter()
payments_api = api

WEBHOOK_PATH = "/webhook_mp"


class CheckoutItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[Any] = None
    title: Optional[Any] = None
    quantity: Optional[Any] = None
    unit_price: Optional[Any] = None


class CheckoutPayer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    email: Optional[Any] = None


class CreatePreferenceRequest(BaseModel):
    items: Optional[List[CheckoutItem]] = Field(default=None, description="Cart line items")
    payer: Optional[CheckoutPayer] = None


@api.post("/create_preference", tags=["Payments"], status_code=status.HTTP_201_CREATED)
async def create_preference(
    body: CreatePreferenceRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    client: PaymentPreferenceClient = Depends(get_payments_client),
):
    if not body.items:
        raise HTTPException(status_code=400, detail="Itens são obrigatórios para criar a preferência.")

    try:
        items = [_to_preference_item(item, settings.mercado_pago.currency_id) for item in body.items]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Item inválido: {e}")

    preference_request = PreferenceRequest(
        items=items,
        payer=Payer(name=body.payer.name, email=body.payer.email) if body.payer else None,
        back_urls=BackUrls(
            success=settings.urls.success,
            failure=settings.urls.failure,
            pending=settings.urls.pending,
        ),
        notification_url=_notification_url(request, settings.mercado_pago.webhook_secret),
    )

    try:
        result = await client.create_preference(preference_request)
    except Exception as e:
        cause = getattr(e, "payload", None) or e.__cause__ or e
        logger.error("Error creating Mercado Pago preference: %s", cause, exc_info=True)
        raise HTTPException(status_code=500, detail="Falha ao comunicar com o Mercado Pago.")

    return {
        "id": result.id,
        "init_point": result.init_point,
        "sandbox_init_point": result.sandbox_init_point,
    }


def _to_preference_item(item: CheckoutItem, currency_id: str) -> PreferenceItem:
    quantity = _to_number(item.quantity, "quantity")
    return PreferenceItem(
        id=item.id,
        title=item.title,
        quantity=int(quantity) if quantity.is_integer() else quantity,
        unit_price=_to_number(item.unit_price, "unit_price"),
        currency_id=currency_id,
    )


def _to_number(value: Any, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be a number, got {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"{field} must be a finite number")
    return number


def _notification_url(request: Request, secret: str) -> str:
    return f"{request.url.scheme}://{request.url.netloc}{WEBHOOK_PATH}?{urlencode({'secret': secret})}"
