import logging
from pathlib import Path
from typing import Union

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Базовый класс для моделей
Base = declarative_base()


def _enable_sqlite_pragmas(dbapi_connection, connection_record):
    """WAL журнал и внешние ключи для каждого нового соединения"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(db_path: Union[str, Path], echo: bool = False) -> AsyncEngine:
    """Создает асинхронный движок для файла SQLite (без подключения)"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}",
        echo=echo,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_pragmas)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Создает таблицы, если их еще нет"""
    # Импорт регистрирует модели в Base.metadata
    from . import models  # noqa: F401

    if engine.url.database:
        Path(engine.url.database).parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Database tables created")


async def ping(engine: AsyncEngine) -> bool:
    """Проверка подключения к БД"""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"❌ Database ping failed: {e}")
        return False
