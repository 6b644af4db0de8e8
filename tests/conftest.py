# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.pool import StaticPool

from question_catalog.clients.database_client import get_db
from question_catalog.config.settings import Settings
from question_catalog.domain.models import Base
from question_catalog.main import create_app

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД с пустыми таблицами."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Создать тестовую сессию БД."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def app_env():
    """Режим приложения; тесты переопределяют через parametrize/фикстуру."""
    return "development"


@pytest.fixture
def app(test_session, app_env):
    """Приложение с подменённой зависимостью get_db."""
    application = create_app(
        Settings(database_url=TEST_DATABASE_URL, app_env=app_env)
    )

    async def override_get_db():
        yield test_session

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Асинхронный тестовый клиент для API."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client
