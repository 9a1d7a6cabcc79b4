"""
Google Sheets — MOCK client.

Serves rows from memory. Seeded with a small catalogue so the storefront can
be developed without a service account.
"""

import logging
from typing import Dict, List, Optional

from src.integrations.contracts.interfaces import SpreadsheetRowSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

MOCK_PRODUCT_ROWS: List[Dict[str, str]] = [
    {
        "id": "1",
        "nome": "Caderno de Atividades",
        "descricao": "Atividades de alfabetização",
        "descricaocompleta": "Caderno com 60 atividades de alfabetização para o 1º ano.",
        "preco": "29.90",
        "categoria": "Alfabetização",
        "url_imagem1": "https://example.com/img/caderno-capa.jpg",
        "urlimagem1": "https://example.com/img/caderno-miolo.jpg",
    },
    {
        "id": "2",
        "nome": "Jogo da Memória das Sílabas",
        "descricao": "Jogo pedagógico imprimível",
        "descricaocompleta": "Arquivo PDF com 40 cartas de sílabas simples.",
        "preco": "15.00",
        "categoria": "Jogos",
    },
]


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class MockSheetsClient(SpreadsheetRowSource):
    """
    In-memory spreadsheet client.

    Parameters
    ----------
    rows : list of dict, optional
        Rows returned for every spreadsheet id. Defaults to MOCK_PRODUCT_ROWS.
    error : Exception, optional
        When set, load_rows raises it instead of returning rows.
    """

    def __init__(self, rows: Optional[List[Dict[str, str]]] = None, error: Optional[Exception] = None) -> None:
        self.rows = list(MOCK_PRODUCT_ROWS if rows is None else rows)
        self.error = error
        self.calls: List[str] = []

    async def load_rows(self, spreadsheet_id: str, sheet_index: int = 0) -> List[Dict[str, str]]:
        self.calls.append(spreadsheet_id)
        if self.error is not None:
            raise self.error
        logger.debug("[MOCK Sheets] Serving %d rows for %s", len(self.rows), spreadsheet_id)
        return [dict(row) for row in self.rows]
