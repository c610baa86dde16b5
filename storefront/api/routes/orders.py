import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from ...config import Settings
from ...exceptions import OrderStoreError
from ...schemas.order import OrderSummary
from ...services.order_store import OrderStore
from ..dependencies import get_order_store, get_request_id, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderSummary])
async def get_orders(
        order_store: OrderStore = Depends(get_order_store),
        settings: Settings = Depends(get_settings),
        request_id: Optional[str] = Depends(get_request_id)
):
    """Последние заказы, новые первыми"""
    try:
        return await order_store.list_recent_orders(limit=settings.orders_list_limit)
    except OrderStoreError as e:
        logger.error(f"❌ orders_list_failed request_id={request_id} error={e}")
        raise
