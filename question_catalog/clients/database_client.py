# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных.

Движок создаётся один раз на процесс (в lifespan приложения) и хранится в
``app.state``; обработчики получают сессию через зависимость ``get_db``.
"""
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from question_catalog.config.logger import configure_logger
from question_catalog.config.settings import Settings
from question_catalog.domain.models import Base

logger = configure_logger()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Создаёт асинхронный движок по строке подключения из настроек."""
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,  # Проверяем соединение перед использованием
        pool_recycle=3600,  # Переподключаемся каждый час
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Создаёт фабрику асинхронных сессий."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Объекты остаются доступными после коммита
    )


async def check_connection(engine: AsyncEngine) -> None:
    """
    Проверяет доступность базы данных.

    Raises:
        SQLAlchemyError: База данных недоступна
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db(engine: AsyncEngine) -> None:
    """
    Создаёт таблицы для всех моделей, если их ещё нет.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Таблицы базы данных готовы")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных
    """
    session_factory: async_sessionmaker[AsyncSession] = (
        request.app.state.session_factory
    )
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
