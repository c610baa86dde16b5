from typing import Optional

from fastapi import APIRouter, Depends

from ...schemas.cart import CartAddRequest, OkResponse
from ...services.cart_service import CartService
from ..dependencies import get_cart_service, get_request_id

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("/add", response_model=OkResponse)
async def add_to_cart(
        payload: CartAddRequest,
        cart_service: CartService = Depends(get_cart_service),
        request_id: Optional[str] = Depends(get_request_id)
):
    """Добавление товара в корзину"""
    cart_service.add_item(payload.id, payload.qty, request_id=request_id)
    return OkResponse()
