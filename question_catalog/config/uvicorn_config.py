# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from question_catalog.config.logger import InterceptHandler
from question_catalog.config.settings import Settings


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn, FastAPI и SQLAlchemy."""

    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ]:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers.clear()
        logger_obj.propagate = False

    logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    logging.getLogger("uvicorn.error").handlers = [InterceptHandler()]
    logging.getLogger("fastapi").handlers = [InterceptHandler()]

    # SQLAlchemy - только предупреждения и ошибки
    logging.getLogger("sqlalchemy.engine").handlers = [InterceptHandler()]
    logging.getLogger("sqlalchemy.pool").handlers = [InterceptHandler()]

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def get_uvicorn_config(settings: Settings) -> dict:
    """Возвращает конфигурацию для uvicorn."""
    return {
        "app": "question_catalog.main:create_app",
        "factory": True,
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": settings.is_development,
        "log_config": None,  # Отключаем стандартную конфигурацию логов
        "access_log": True,
    }
