# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Question Catalog.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from question_catalog import __version__
from question_catalog.api.v1.questions import router as questions_router
from question_catalog.clients.database_client import (check_connection,
                                                      create_engine_from_settings,
                                                      create_session_factory,
                                                      init_db)
from question_catalog.config.logger import configure_logger, get_system_logger
from question_catalog.config.settings import Settings, get_settings
from question_catalog.config.uvicorn_config import setup_uvicorn_logging
from question_catalog.utils.exceptions import register_exception_handlers

logger = configure_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_uvicorn_logging()

    system_logger = get_system_logger()
    system_logger.info("🔧 Инициализация сервисов...")
    system_logger.info(f"Конфигурация: {settings.get_config_source()}")

    engine = create_engine_from_settings(settings)
    try:
        await check_connection(engine)
        logger.info("✅ База данных подключена")
        await init_db(engine)
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        await engine.dispose()
        raise

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    system_logger.info(
        f"🎉 Question Catalog API запущен на порту {settings.app_port}"
    )

    yield

    logger.info("🛑 Завершение работы Question Catalog API")
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Создаёт приложение.

    Без явно переданных настроек читает их из окружения; если ``DATABASE_URL``
    не задан, падает с ошибкой валидации настроек.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Question Catalog API",
        description="Каталог задач для практики: поиск, прогресс и статистика",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_all_requests(request: Request, call_next):
        is_api = request.url.path.startswith("/api/")
        if is_api:
            logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            if is_api:
                logger.exception(
                    f"💥 Критическая ошибка API: {request.method} {request.url.path}"
                )
            raise

        if is_api:
            if response.status_code >= 400:
                logger.warning(
                    f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
                )
            else:
                logger.info(
                    f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
                )
        return response

    register_exception_handlers(app, debug=settings.is_development)

    app.include_router(questions_router, prefix="/api")

    @app.get("/api")
    async def api_root():
        """Корневой эндпоинт API."""
        return {
            "success": True,
            "message": "Question Catalog API работает",
            "data": {"version": app.version},
        }

    @app.get("/api/health")
    async def api_health():
        """Проверка живости приложения."""
        return {"success": True, "data": {"status": "ok"}}

    return app
