from typing import Optional

from fastapi import Request

from ..config import Settings
from ..services.cart_service import CartService
from ..services.catalog import Catalog
from ..services.checkout_service import CheckoutService
from ..services.order_store import OrderStore
from ..services.telemetry import PrometheusTelemetry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> Catalog:
    """Dependency для получения каталога"""
    return request.app.state.catalog


def get_telemetry(request: Request) -> PrometheusTelemetry:
    return request.app.state.telemetry


def get_order_store(request: Request) -> OrderStore:
    """Dependency для получения хранилища заказов"""
    return request.app.state.order_store


def get_checkout_service(request: Request) -> CheckoutService:
    """Dependency для получения CheckoutService"""
    return request.app.state.checkout_service


def get_cart_service(request: Request) -> CartService:
    """Dependency для получения CartService"""
    return request.app.state.cart_service


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
