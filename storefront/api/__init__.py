from fastapi import APIRouter

from .routes import cart_router, checkout_router, orders_router, products_router

# Создаем основной API router
api_router = APIRouter(prefix="/api")

# Подключаем роуты
api_router.include_router(products_router)
api_router.include_router(cart_router)
api_router.include_router(checkout_router)
api_router.include_router(orders_router)

__all__ = ["api_router"]
