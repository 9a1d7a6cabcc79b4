from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from src.integrations.contracts.interfaces import PreferenceResponse


class IntegrationError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class SpreadsheetError(IntegrationError):
    """Google Sheets could not be reached or answered with an error."""


class PaymentProviderError(IntegrationError):
    """Mercado Pago could not be reached or answered with an error."""


class IntegrationResponseError(IntegrationError, ValueError):
    """An upstream answer arrived but does not match the expected shape."""


class PreferenceResponseModel(BaseModel):
    id: str
    init_point: Optional[str] = None
    sandbox_init_point: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


def normalize_preference_response(raw: Dict[str, Any]) -> PreferenceResponse:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Expected a JSON object from the payment provider, got {type(raw).__name__}.")

    preference_id = _first_non_empty(raw, "id")
    model = _build_model(
        PreferenceResponseModel,
        {
            "id": str(preference_id),
            "init_point": raw.get("init_point"),
            "sandbox_init_point": raw.get("sandbox_init_point"),
            "raw": raw,
        },
        raw,
    )
    return PreferenceResponse(
        id=model.id,
        init_point=model.init_point,
        sandbox_init_point=model.sandbox_init_point,
        raw=model.raw,
    )


def rows_from_values(values: List[List[Any]]) -> List[Dict[str, str]]:
    """
    Turn a Sheets values grid into row mappings keyed by the header row.

    Columns with an empty header are dropped. Short rows only carry the
    cells the API returned; trailing empty cells are never sent.
    """
    if not values:
        return []

    header = [str(h).strip() for h in values[0]]
    rows: List[Dict[str, str]] = []
    for raw_row in values[1:]:
        row: Dict[str, str] = {}
        for column, cell in zip(header, raw_row):
            if not column or column in row:
                continue
            row[column] = "" if cell is None else str(cell)
        if any(v.strip() for v in row.values()):
            rows.append(row)
    return rows


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
