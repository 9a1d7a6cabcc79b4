from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

"""
Product catalogue contract.

Defines the product shape served to the storefront. Field names are Python
identifiers; the serialized keys are the Portuguese names the storefront
reads (ID, Nome, Preço, Imagens, ...).
"""

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x300?text=Sem+Imagem"


class Product(BaseModel):
    """A single catalogue entry built from one spreadsheet row."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[str] = Field(default=None, alias="ID")
    name: Optional[str] = Field(default=None, alias="Nome")
    description: Optional[str] = Field(default=None, alias="Descrição")
    full_description: Optional[str] = Field(default=None, alias="DescriçãoCompleta")
    price: Optional[str] = Field(default=None, alias="Preço")
    category: Optional[str] = Field(default=None, alias="Categoria")
    images: List[str] = Field(default_factory=lambda: [PLACEHOLDER_IMAGE_URL], alias="Imagens")
    image_url: str = Field(default=PLACEHOLDER_IMAGE_URL, alias="URL_Imagem")

    def to_public_dict(self) -> dict:
        return self.model_dump(by_alias=True)
