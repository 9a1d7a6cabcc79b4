from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class PreferenceItem:
    id: Any
    title: Optional[Any]
    quantity: float
    unit_price: float
    currency_id: str


@dataclass
class Payer:
    name: Optional[Any] = None
    email: Optional[Any] = None


@dataclass
class BackUrls:
    success: str
    failure: str
    pending: str


@dataclass
class PreferenceRequest:
    items: List[PreferenceItem]
    back_urls: BackUrls
    notification_url: str
    payer: Optional[Payer] = None
    auto_return: str = "approved"


@dataclass
class PreferenceResponse:
    id: str
    init_point: Optional[str]
    sandbox_init_point: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Abstract client interfaces
# ---------------------------------------------------------------------------

class SpreadsheetRowSource(ABC):
    """Every spreadsheet client (real or mock) must implement this interface."""

    @abstractmethod
    async def load_rows(self, spreadsheet_id: str, sheet_index: int = 0) -> List[Dict[str, str]]:
        """Return every data row of one sheet as a header -> cell mapping."""


class PaymentPreferenceClient(ABC):
    """Every payment provider client (real or mock) must implement this interface."""

    @abstractmethod
    async def create_preference(self, request: PreferenceRequest) -> PreferenceResponse:
        """Create a checkout preference and return its id and checkout links."""
