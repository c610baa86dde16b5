import logging
from typing import Any, Optional

from ..exceptions import InvalidCartError
from .catalog import Catalog
from .checkout_service import parse_quantity
from .telemetry import ADD_TO_CART, Telemetry


class CartService:
    """Добавление в корзину; сама корзина хранится на клиенте"""

    def __init__(self, catalog: Catalog, telemetry: Telemetry):
        self.catalog = catalog
        self.telemetry = telemetry

    def add_item(self, product_id: Optional[str], qty: Any, request_id: Optional[str] = None) -> int:
        """Проверяет товар и количество, считает метрику, возвращает количество"""
        product = self.catalog.get(product_id) if product_id else None
        quantity = parse_quantity(qty)
        if product is None or quantity is None:
            raise InvalidCartError("Invalid payload")

        self.telemetry.increment_counter(ADD_TO_CART, quantity, product_id=product.id)
        self.telemetry.log_event(
            logging.INFO,
            "add_to_cart",
            request_id=request_id,
            product_id=product.id,
            qty=quantity,
        )
        return quantity
