from fastapi import APIRouter, Query

from flashsale.models.product import Product
from flashsale.schemas.catalog import ProductOut
from flashsale.seed import AVAILABLE_PRODUCTS
from flashsale.services.catalog import get_products_by_ids
from flashsale.services.formatting import format_currency

router = APIRouter(prefix="/products", tags=["products"])


def _product_out(product: Product) -> ProductOut:
    return ProductOut(
        id=product.id,
        name=product.name,
        category=product.category,
        price=product.price,
        price_display=format_currency(product.price),
    )


@router.get("", response_model=list[ProductOut])
def list_products(category: str | None = None):
    products = AVAILABLE_PRODUCTS
    if category:
        wanted = category.strip().lower()
        products = tuple(item for item in products if item.category == wanted)
    return [_product_out(item) for item in products]


@router.get("/lookup", response_model=list[ProductOut])
def lookup_products(ids: list[int] | None = Query(None)):
    return [_product_out(item) for item in get_products_by_ids(ids)]
