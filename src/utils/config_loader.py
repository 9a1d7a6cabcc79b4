"""
Configuration loader for the store backend.

Settings come from the process environment (and a local .env file outside
production) and are validated once at startup into an immutable model that
is handed to the application factory.
"""

import logging
import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

PEM_HEADER = "-----BEGIN"


class ConfigurationError(ValueError):
    """Raised when required settings are missing or malformed."""

    def __init__(self, problems: List[str]) -> None:
        super().__init__("Invalid configuration: " + "; ".join(problems))
        self.problems = problems


class GoogleConfig(BaseModel):
    """Service account credentials and spreadsheet identifiers"""

    model_config = ConfigDict(frozen=True)

    service_account_email: str = Field(min_length=1)
    private_key: str = Field(min_length=1)
    products_spreadsheet_id: str = Field(min_length=1)
    orders_spreadsheet_id: str = Field(min_length=1)

    @field_validator("private_key")
    @classmethod
    def _unescape_private_key(cls, value: str) -> str:
        # Hosting dashboards store the PEM on a single line with literal "\n".
        key = value.replace("\\n", "\n")
        if PEM_HEADER not in key:
            raise ValueError("private key is not a PEM block")
        return key


class MercadoPagoConfig(BaseModel):
    """Payment provider credentials"""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(min_length=1)
    webhook_secret: str = Field(min_length=1)
    api_base_url: str = "https://api.mercadopago.com"
    currency_id: str = "BRL"


class RedirectUrls(BaseModel):
    """Storefront pages the checkout returns to"""

    model_config = ConfigDict(frozen=True)

    success: str = Field(min_length=1)
    failure: str = Field(min_length=1)
    pending: str = Field(min_length=1)


class Settings(BaseModel):
    """Complete application configuration"""

    model_config = ConfigDict(frozen=True)

    google: GoogleConfig
    mercado_pago: MercadoPagoConfig
    urls: RedirectUrls
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    integrations_mode: str = "real"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        # getLevelName maps known names to their numeric level.
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @field_validator("integrations_mode")
    @classmethod
    def _known_mode(cls, value: str) -> str:
        mode = value.strip().lower() or "real"
        if mode not in {"real", "mock"}:
            raise ValueError(f"unknown integrations mode '{value}', expected 'real' or 'mock'")
        return mode

    @property
    def use_mock_integrations(self) -> bool:
        return self.integrations_mode == "mock"


_REQUIRED_VARS = {
    "GOOGLE_SERVICE_ACCOUNT_EMAIL": ("google", "service_account_email"),
    "GOOGLE_PRIVATE_KEY": ("google", "private_key"),
    "PLANILHA_PRODUTOS_ID": ("google", "products_spreadsheet_id"),
    "PLANILHA_PEDIDOS_ID": ("google", "orders_spreadsheet_id"),
    "MP_ACCESS_TOKEN": ("mercado_pago", "access_token"),
    "MP_WEBHOOK_SECRET": ("mercado_pago", "webhook_secret"),
    "FRONTEND_URL_SUCESSO": ("urls", "success"),
    "FRONTEND_URL_FALHA": ("urls", "failure"),
    "FRONTEND_URL_PENDENTE": ("urls", "pending"),
}

_OPTIONAL_VARS = {
    "MP_API_BASE_URL": ("mercado_pago", "api_base_url"),
    "MP_CURRENCY_ID": ("mercado_pago", "currency_id"),
    "HOST": (None, "host"),
    "PORT": (None, "port"),
    "LOG_LEVEL": (None, "log_level"),
    "INTEGRATIONS_MODE": (None, "integrations_mode"),
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build and validate Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ, after loading
            a .env file unless APP_ENV is "production".

    Returns:
        Validated, immutable Settings

    Raises:
        ConfigurationError: If any required variable is missing or any value is malformed
    """
    if environ is None:
        if os.getenv("APP_ENV", "").strip().lower() != "production":
            load_dotenv()
        environ = os.environ

    problems: List[str] = []
    sections: dict = {"google": {}, "mercado_pago": {}, "urls": {}}
    top_level: dict = {}

    for var, (section, key) in _REQUIRED_VARS.items():
        value = (environ.get(var) or "").strip()
        if not value:
            problems.append(f"{var} is not set")
            continue
        sections[section][key] = value

    for var, (section, key) in _OPTIONAL_VARS.items():
        value = (environ.get(var) or "").strip()
        if not value:
            continue
        if section is None:
            top_level[key] = value
        else:
            sections[section][key] = value

    origins = [o.strip() for o in (environ.get("CORS_ALLOW_ORIGINS") or "").split(",") if o.strip()]
    if origins:
        top_level["cors_allow_origins"] = origins

    if problems:
        raise ConfigurationError(problems)

    try:
        settings = Settings(**sections, **top_level)
    except ValidationError as e:
        raise ConfigurationError(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e

    logger.info(
        "Loaded settings (integrations_mode=%s, currency=%s)",
        settings.integrations_mode,
        settings.mercado_pago.currency_id,
    )
    return settings
