import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from decimal import Decimal
from typing import AsyncIterator, List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..exceptions import OrderStoreError
from ..models.order import Order
from ..models.order_item import OrderItem

logger = logging.getLogger(__name__)


class OrderTransaction:
    """Открытая транзакция записи; живет только внутри OrderStore.transaction()"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_order(self, total: Decimal, item_count: int, created_at: datetime) -> int:
        """Добавляет заказ и возвращает назначенный ID"""
        order = Order(created_at=created_at, total=total, item_count=item_count)
        self.session.add(order)
        await self.session.flush()  # Получаем ID заказа
        return order.id

    async def add_order_item(self, order_id: int, product_id: str, qty: int, price: Decimal) -> None:
        self.session.add(
            OrderItem(order_id=order_id, product_id=product_id, qty=qty, price=price)
        )
        await self.session.flush()


class OrderStore:
    """
    Журнал заказов только на добавление.

    Записи идут строго по одной транзакции за раз, чтение параллельно
    и видит только закоммиченные данные.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory
        self._write_lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[OrderTransaction]:
        """
        Транзакция записи: commit при нормальном выходе, rollback при любой ошибке.

        Ошибки SQLAlchemy превращаются в OrderStoreError. Сбой самого rollback
        только логируется и не подменяет исходную ошибку.
        """
        async with self._write_lock:
            async with self._session_factory() as session:
                try:
                    yield OrderTransaction(session)
                    await session.commit()
                except Exception as e:
                    await self._rollback(session)
                    # OverflowError: значение не помещается в INTEGER при биндинге
                    if isinstance(e, (SQLAlchemyError, OverflowError)):
                        raise OrderStoreError(f"Order transaction failed: {e}") from e
                    raise

    @staticmethod
    async def _rollback(session: AsyncSession) -> None:
        try:
            await session.rollback()
        except Exception as rollback_error:
            logger.error(f"❌ checkout_rollback_failed error={rollback_error}", exc_info=True)

    async def list_recent_orders(self, limit: int = 20) -> List[Order]:
        """Последние заказы, новые первыми, без позиций"""
        try:
            async with self._session_factory() as session:
                query = select(Order).order_by(Order.id.desc()).limit(limit)
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise OrderStoreError(f"Failed to list orders: {e}") from e

    async def count_orders(self) -> int:
        """Подсчитывает общее количество заказов"""
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(func.count(Order.id)))
                return result.scalar() or 0
        except SQLAlchemyError as e:
            raise OrderStoreError(f"Failed to count orders: {e}") from e
