import logging

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies import get_catalog
from src.integrations.policy.catalog_service import ProductCatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/produtos", tags=["Products"])
async def list_products(catalog: ProductCatalogService = Depends(get_catalog)):
    """Return every product in the catalogue spreadsheet."""
    try:
        products = await catalog.list_products()
    except Exception as e:
        logger.error(f"Error fetching products: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Erro interno ao buscar produtos da planilha.")
    return [product.to_public_dict() for product in products]


@router.get("/produtos/{product_id}", tags=["Products"])
async def get_product(product_id: str, catalog: ProductCatalogService = Depends(get_catalog)):
    try:
        product = await catalog.get_product(product_id)
        if product is None:
            raise HTTPException(status_code=404, detail="Produto não encontrado.")
        return product.to_public_dict()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Erro interno ao buscar o produto.")
