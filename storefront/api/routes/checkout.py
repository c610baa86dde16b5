from typing import Optional

from fastapi import APIRouter, Depends

from ...schemas.cart import CheckoutRequest, CheckoutResponse
from ...services.checkout_service import CartLine, CheckoutService
from ..dependencies import get_checkout_service, get_request_id

router = APIRouter(tags=["checkout"])


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(
        payload: CheckoutRequest,
        checkout_service: CheckoutService = Depends(get_checkout_service),
        request_id: Optional[str] = Depends(get_request_id)
):
    """Оформление заказа"""
    items = [CartLine(product_id=item.id, qty=item.qty) for item in payload.items]
    result = await checkout_service.checkout(items, request_id=request_id)
    return CheckoutResponse(total=float(result.total), order_id=result.order_id)
