from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


class OrderSummary(BaseModel):
    id: int
    total: float
    item_count: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """SQLite возвращает время без зоны; в базе оно всегда UTC"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    class Config:
        from_attributes = True
