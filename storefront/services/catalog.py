from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..exceptions import ProductNotFoundError


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    description: str
    badge: str

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Product {self.id} has negative price")


DEFAULT_PRODUCTS = (
    Product(
        id="copper-mug",
        name="Copper Mug",
        price=Decimal("12.50"),
        description="Hand-hammered mug for warm drinks.",
        badge="Craft",
    ),
    Product(
        id="linen-tote",
        name="Linen Tote",
        price=Decimal("18.00"),
        description="Lightweight tote with sturdy handles.",
        badge="Everyday",
    ),
    Product(
        id="atlas-notebook",
        name="Atlas Notebook",
        price=Decimal("9.00"),
        description="Dot-grid pages with soft-touch cover.",
        badge="Study",
    ),
)


class Catalog:
    """Неизменяемый каталог товаров, живет все время процесса"""

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS):
        self._products: Dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id {product.id}")
            self._products[product.id] = product

    def all(self) -> List[Product]:
        return list(self._products.values())

    def get(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def require(self, product_id: str) -> Product:
        """Возвращает товар или бросает ProductNotFoundError"""
        product = self.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def __len__(self) -> int:
        return len(self._products)
