import pytest
from googleapiclient.errors import HttpError
from httplib2 import Response

from src.integrations.clients.real_http.google_sheets import GoogleSheetsClient
from src.integrations.policy.response_wrappers import SpreadsheetError, rows_from_values


class FakeRequest:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.result


class FakeValues:
    def __init__(self, service):
        self.service = service

    def get(self, spreadsheetId, range):
        self.service.ranges.append((spreadsheetId, range))
        return FakeRequest(result={"values": self.service.values}, error=self.service.values_error)


class FakeSpreadsheets:
    def __init__(self, service):
        self.service = service

    def get(self, spreadsheetId, fields=None):
        return FakeRequest(result={"sheets": self.service.sheets})

    def values(self):
        return FakeValues(self.service)


class FakeSheetsService:
    def __init__(self, sheets, values, values_error=None):
        self.sheets = sheets
        self.values = values
        self.values_error = values_error
        self.ranges = []

    def spreadsheets(self):
        return FakeSpreadsheets(self)


SHEETS = [
    {"properties": {"title": "Pedidos", "index": 1}},
    {"properties": {"title": "Produtos da Loja", "index": 0}},
]


@pytest.mark.asyncio
async def test_load_rows_reads_first_sheet_by_index():
    service = FakeSheetsService(
        SHEETS,
        [["id", "nome", "preco"], ["1", "Caderno", "29.90"], ["2", "Jogo"]],
    )
    client = GoogleSheetsClient(service=service)

    rows = await client.load_rows("sheet-produtos")

    assert service.ranges == [("sheet-produtos", "'Produtos da Loja'")]
    assert rows == [
        {"id": "1", "nome": "Caderno", "preco": "29.90"},
        {"id": "2", "nome": "Jogo"},
    ]


@pytest.mark.asyncio
async def test_sheet_index_out_of_range_raises():
    client = GoogleSheetsClient(service=FakeSheetsService(SHEETS, []))

    with pytest.raises(SpreadsheetError):
        await client.load_rows("sheet-produtos", sheet_index=5)


@pytest.mark.asyncio
async def test_http_error_is_wrapped():
    error = HttpError(Response({"status": "403"}), b'{"error": {"message": "forbidden"}}')
    client = GoogleSheetsClient(service=FakeSheetsService(SHEETS, [], values_error=error))

    with pytest.raises(SpreadsheetError) as exc_info:
        await client.load_rows("sheet-produtos")

    assert exc_info.value.__cause__ is error


def test_credentials_are_required_without_service():
    with pytest.raises(SpreadsheetError):
        GoogleSheetsClient(service_account_email="", private_key="")


def test_rows_from_values_skips_blank_rows_and_headers():
    values = [
        ["id", "", "nome", "id"],
        ["1", "ignored", "A", "dup"],
        [],
        ["", "", "  "],
        ["2", None, "B"],
    ]

    assert rows_from_values(values) == [
        {"id": "1", "nome": "A"},
        {"id": "2", "nome": "B"},
    ]


def test_rows_from_values_empty_sheet():
    assert rows_from_values([]) == []
    assert rows_from_values([["id", "nome"]]) == []
