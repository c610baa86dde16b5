from typing import Any, List, Optional

from pydantic import BaseModel


class CartAddRequest(BaseModel):
    id: Optional[str] = None
    # Количество проверяет сервис, чтобы ответ был 400, а не 422
    qty: Any = None


class CheckoutItem(BaseModel):
    id: Optional[str] = None
    qty: Any = None


class CheckoutRequest(BaseModel):
    items: List[CheckoutItem] = []


class OkResponse(BaseModel):
    ok: bool = True


class CheckoutResponse(OkResponse):
    total: float
    order_id: int
