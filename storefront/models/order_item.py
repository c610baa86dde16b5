from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from ..database import Base


class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)

    # Информация о товаре
    product_id = Column(String(100), nullable=False)

    # Количество и цена за единицу на момент заказа
    qty = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # Связи
    order = relationship("Order", back_populates="items")
