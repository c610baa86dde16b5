from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # Основные настройки приложения
    app_name: str = "ecommerce-lite"
    debug: bool = False
    log_level: str = "INFO"

    # Сервер
    host: str = "0.0.0.0"
    port: int = 3000

    # База данных (SQLite файл)
    db_path: Path = Path("data") / "app.db"

    # Сколько заказов отдает /api/orders
    orders_list_limit: int = 20

    # CORS
    allowed_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Создаем экземпляр настроек
settings = Settings()
