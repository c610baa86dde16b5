from decimal import Decimal

import pytest

from storefront.exceptions import ProductNotFoundError
from storefront.services.catalog import DEFAULT_PRODUCTS, Catalog, Product


def test_default_catalog():
    catalog = Catalog()
    assert len(catalog) == 3
    assert catalog.get("copper-mug").price == Decimal("12.50")
    assert catalog.get("missing") is None


def test_require_unknown_product():
    with pytest.raises(ProductNotFoundError) as exc_info:
        Catalog().require("unknown-sku")
    assert exc_info.value.product_id == "unknown-sku"


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        Catalog([DEFAULT_PRODUCTS[0], DEFAULT_PRODUCTS[0]])


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        Product("x", "X", Decimal("-1"), "", "")


def test_products_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_PRODUCTS[0].price = Decimal("0")
