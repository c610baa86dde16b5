from typing import List

from fastapi import APIRouter, Depends

from ...schemas.product import ProductResponse
from ...services.catalog import Catalog
from ...services.telemetry import PRODUCT_VIEWS, PrometheusTelemetry
from ..dependencies import get_catalog, get_telemetry

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[ProductResponse])
async def list_products(catalog: Catalog = Depends(get_catalog)):
    """Весь каталог"""
    return catalog.all()


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
        product_id: str,
        catalog: Catalog = Depends(get_catalog),
        telemetry: PrometheusTelemetry = Depends(get_telemetry)
):
    """Карточка товара; неизвестный ID дает 404"""
    product = catalog.require(product_id)
    telemetry.increment_counter(PRODUCT_VIEWS, product_id=product.id)
    return product
