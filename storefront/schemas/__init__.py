from .cart import CartAddRequest, CheckoutItem, CheckoutRequest, CheckoutResponse, OkResponse
from .order import OrderSummary
from .product import ProductResponse

__all__ = [
    "CartAddRequest",
    "CheckoutItem",
    "CheckoutRequest",
    "CheckoutResponse",
    "OkResponse",
    "OrderSummary",
    "ProductResponse"
]
