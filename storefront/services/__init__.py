from .cart_service import CartService
from .catalog import DEFAULT_PRODUCTS, Catalog, Product
from .checkout_service import CartLine, CheckoutResult, CheckoutService
from .order_store import OrderStore, OrderTransaction
from .telemetry import PrometheusTelemetry, Telemetry

__all__ = [
    "CartService",
    "Catalog",
    "Product",
    "DEFAULT_PRODUCTS",
    "CartLine",
    "CheckoutResult",
    "CheckoutService",
    "OrderStore",
    "OrderTransaction",
    "PrometheusTelemetry",
    "Telemetry"
]
