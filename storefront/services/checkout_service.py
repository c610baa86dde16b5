import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from ..exceptions import EmptyCartError, InvalidCartError, OrderStoreError
from .catalog import Catalog, Product
from .order_store import OrderStore
from .telemetry import CHECKOUT_ITEMS_LAST, CHECKOUT_VALUE, CHECKOUTS, Telemetry


# Верхняя граница количества в одной позиции
MAX_QUANTITY = 10_000


@dataclass(frozen=True)
class CartLine:
    """Позиция корзины в том виде, в каком ее прислал клиент"""

    product_id: Optional[str]
    qty: Any


@dataclass(frozen=True)
class PricedLine:
    product: Product
    qty: int

    @property
    def extension(self) -> Decimal:
        return self.product.price * self.qty


@dataclass(frozen=True)
class PricedCart:
    lines: List[PricedLine]
    total: Decimal
    item_count: int


@dataclass(frozen=True)
class CheckoutResult:
    order_id: int
    total: Decimal
    item_count: int


def parse_quantity(raw: Any) -> Optional[int]:
    """
    Приводит количество к целому положительному числу.

    Допускаются int и float без дробной части (2.0). Строки, bool,
    NaN/inf, дробные, неположительные и больше MAX_QUANTITY значения дают None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        qty = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            return None
        qty = int(raw)
    else:
        return None
    return qty if 0 < qty <= MAX_QUANTITY else None


class CheckoutService:
    """Оформление заказа: проверка корзины, подсчет суммы, запись в журнал"""

    def __init__(self, catalog: Catalog, order_store: OrderStore, telemetry: Telemetry):
        self.catalog = catalog
        self.order_store = order_store
        self.telemetry = telemetry

    def price_cart(self, items: Sequence[CartLine]) -> PricedCart:
        """Проверяет все позиции целиком; одна плохая позиция отклоняет всю корзину"""
        if not items:
            raise EmptyCartError()

        lines = []
        for item in items:
            product = self.catalog.get(item.product_id) if item.product_id else None
            if product is None:
                raise InvalidCartError(f"Invalid item: unknown product {item.product_id!r}")

            qty = parse_quantity(item.qty)
            if qty is None:
                raise InvalidCartError(f"Invalid item: bad quantity {item.qty!r} for {product.id}")

            lines.append(PricedLine(product=product, qty=qty))

        return PricedCart(
            lines=lines,
            total=sum((line.extension for line in lines), Decimal("0")),
            item_count=sum(line.qty for line in lines),
        )

    async def checkout(self, items: Sequence[CartLine], request_id: Optional[str] = None) -> CheckoutResult:
        """Создает заказ и его позиции в одной транзакции"""
        cart = self.price_cart(items)

        try:
            async with self.order_store.transaction() as tx:
                order_id = await tx.create_order(
                    total=cart.total,
                    item_count=cart.item_count,
                    created_at=datetime.now(timezone.utc),
                )
                for line in cart.lines:
                    await tx.add_order_item(
                        order_id=order_id,
                        product_id=line.product.id,
                        qty=line.qty,
                        price=line.product.price,
                    )
        except OrderStoreError as e:
            self.telemetry.log_event(
                logging.ERROR, "checkout_db_failed", request_id=request_id, error=str(e)
            )
            raise

        self.telemetry.increment_counter(CHECKOUTS)
        self.telemetry.observe_histogram(CHECKOUT_VALUE, float(cart.total))
        self.telemetry.set_gauge(CHECKOUT_ITEMS_LAST, cart.item_count)
        self.telemetry.log_event(
            logging.INFO,
            "checkout_completed",
            request_id=request_id,
            order_id=order_id,
            total=cart.total,
            item_count=cart.item_count,
        )

        return CheckoutResult(order_id=order_id, total=cart.total, item_count=cart.item_count)
