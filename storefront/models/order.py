from sqlalchemy import Column, DateTime, Integer, Numeric
from sqlalchemy.orm import relationship

from ..database import Base


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    # Монотонный ID, назначается SQLite
    id = Column(Integer, primary_key=True)

    # Момент оформления в UTC
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Суммы
    total = Column(Numeric(10, 2), nullable=False)
    item_count = Column(Integer, nullable=False)

    # Связи (список заказов позиции не загружает)
    items = relationship("OrderItem", back_populates="order", lazy="raise")
