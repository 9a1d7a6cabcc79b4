"""
Product Catalogue Service

Reads the products spreadsheet and maps each row into the Product contract.
Every call goes back to the spreadsheet; nothing is cached.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from src.integrations.contracts.interfaces import SpreadsheetRowSource
from src.integrations.contracts.product_catalogues import PLACEHOLDER_IMAGE_URL, Product

logger = logging.getLogger(__name__)

MAX_IMAGE_COLUMNS = 5
MAX_ID_EXPONENT = 64

# Column name variants scanned per image index, in order. Each variant lists
# the spellings found in the store's sheets ("imagem" and "imagen").
IMAGE_COLUMN_VARIANTS = (
    ("url_imagem{n}", "url_imagen{n}"),
    ("urlimagem{n}", "urlimagen{n}"),
)


class CatalogError(Exception):
    """The product spreadsheet could not be read."""


def collect_images(row: Dict[str, Any]) -> List[str]:
    images: List[str] = []
    for n in range(1, MAX_IMAGE_COLUMNS + 1):
        for spellings in IMAGE_COLUMN_VARIANTS:
            for spelling in spellings:
                value = row.get(spelling.format(n=n))
                if value is not None and str(value).strip():
                    images.append(str(value).strip())
                    break
    return images or [PLACEHOLDER_IMAGE_URL]


def row_to_product(row: Dict[str, Any]) -> Product:
    images = collect_images(row)
    return Product(
        id=_cell(row, "id"),
        name=_cell(row, "nome"),
        description=_cell(row, "descricao"),
        full_description=_cell(row, "descricaocompleta"),
        price=_cell(row, "preco"),
        category=_cell(row, "categoria"),
        images=images,
        image_url=images[0],
    )


def normalize_product_id(value: Any) -> Optional[str]:
    """
    Canonical form used to compare product identifiers.

    Numeric identifiers compare by value ("1", "1.0", "01" and 1 are equal);
    anything else, including numbers with an exponent beyond
    MAX_ID_EXPONENT, compares as the stripped string. The key is built from
    the decimal digits and exponent, so its cost is bounded by the length
    of the identifier.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return text
    if not number.is_finite():
        return text

    sign, digits, exponent = number.as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    if not any(digits):
        return "0"
    if abs(exponent) > MAX_ID_EXPONENT:
        return text
    return f"{'-' if sign else ''}{''.join(str(d) for d in digits)}e{exponent}"


class ProductCatalogService:
    def __init__(self, source: SpreadsheetRowSource, spreadsheet_id: str, sheet_index: int = 0):
        self.source = source
        self.spreadsheet_id = spreadsheet_id
        self.sheet_index = sheet_index

    async def list_products(self) -> List[Product]:
        try:
            rows = await self.source.load_rows(self.spreadsheet_id, self.sheet_index)
        except Exception as e:
            raise CatalogError(f"Failed to load products from spreadsheet {self.spreadsheet_id}") from e
        return [row_to_product(row) for row in rows]

    async def get_product(self, product_id: Any) -> Optional[Product]:
        wanted = normalize_product_id(product_id)
        if wanted is None:
            return None
        for product in await self.list_products():
            if normalize_product_id(product.id) == wanted:
                return product
        return None


def _cell(row: Dict[str, Any], key: str) -> Optional[str]:
    value = row.get(key)
    if value is None:
        return None
    return str(value)
