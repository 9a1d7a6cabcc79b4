"""
Google Sheets client.

Authenticates with a service account and reads whole sheets as header-keyed
rows. The Google API client is blocking, so every request runs in a worker
thread.

Important:
- This client should be the ONLY place that talks to Google Sheets.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from src.integrations.contracts.interfaces import SpreadsheetRowSource
from src.integrations.policy.response_wrappers import SpreadsheetError, rows_from_values

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_credentials(service_account_email: str, private_key: str) -> service_account.Credentials:
    """Create service account credentials from an email and a PEM private key."""
    info = {
        "type": "service_account",
        "client_email": service_account_email,
        "private_key": private_key,
        "token_uri": TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)


class GoogleSheetsClient(SpreadsheetRowSource):
    """Read-only access to spreadsheets shared with the service account."""

    def __init__(
        self,
        service_account_email: Optional[str] = None,
        private_key: Optional[str] = None,
        service: Optional[Any] = None,
    ) -> None:
        """
        Args:
            service_account_email: Service account client email.
            private_key: PEM private key with real newlines.
            service: Prebuilt Sheets v4 resource; when given, no credentials are built.
        """
        if service is None:
            if not service_account_email or not private_key:
                raise SpreadsheetError("Google service account email and private key are required.")
            credentials = build_credentials(service_account_email, private_key)
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        self.service = service

    async def load_rows(self, spreadsheet_id: str, sheet_index: int = 0) -> List[Dict[str, str]]:
        title = await self._sheet_title(spreadsheet_id, sheet_index)

        def execute_query():
            return (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=_quote_sheet_title(title))
                .execute()
            )

        try:
            result = await asyncio.to_thread(execute_query)
        except (HttpError, GoogleAuthError) as e:
            logger.error("Google Sheets values request failed for %s: %s", spreadsheet_id, e)
            raise SpreadsheetError(f"Could not read sheet '{title}': {e}") from e

        rows = rows_from_values(result.get("values", []))
        logger.debug("Loaded %d rows from sheet '%s'", len(rows), title)
        return rows

    async def _sheet_title(self, spreadsheet_id: str, sheet_index: int) -> str:
        def execute_query():
            return (
                self.service.spreadsheets()
                .get(spreadsheetId=spreadsheet_id, fields="sheets.properties(title,index)")
                .execute()
            )

        try:
            metadata = await asyncio.to_thread(execute_query)
        except (HttpError, GoogleAuthError) as e:
            logger.error("Google Sheets metadata request failed for %s: %s", spreadsheet_id, e)
            raise SpreadsheetError(f"Could not load spreadsheet {spreadsheet_id}: {e}") from e

        sheets = sorted(
            (s.get("properties", {}) for s in metadata.get("sheets", [])),
            key=lambda p: p.get("index", 0),
        )
        if sheet_index >= len(sheets):
            raise SpreadsheetError(
                f"Spreadsheet {spreadsheet_id} has {len(sheets)} sheet(s); index {sheet_index} requested.",
                payload=metadata,
            )
        return sheets[sheet_index]["title"]


def _quote_sheet_title(title: str) -> str:
    return "'" + title.replace("'", "''") + "'"
