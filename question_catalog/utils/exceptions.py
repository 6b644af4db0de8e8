# -*- coding: utf-8 -*-
"""
Пользовательские исключения API каталога вопросов и их обработчики.

Все ошибки приводятся к единому конверту ответа
``{"success": false, "message": ..., "error": ...}``; поле ``error`` с деталями
отдаётся только в режиме разработки.
"""

from enum import Enum

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from question_catalog.config.logger import configure_logger

logger = configure_logger()


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    NOT_FOUND = "NOT_FOUND"
    STORE_FAILURE = "STORE_FAILURE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class APIException(HTTPException):
    """Базовый класс для пользовательских исключений API."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str,
        error: str | None = None,
        headers: dict | None = None,
    ):
        """
        Args:
            status_code (int): HTTP код статуса.
            detail (str): Сообщение об ошибке для клиента.
            error_code (str): Уникальный код ошибки.
            error (str, optional): Техническая причина (только для режима разработки).
            headers (dict, optional): Дополнительные заголовки.
        """
        super().__init__(status_code=status_code, headers=headers)
        self.detail = detail
        self.error_code = error_code
        self.error = error


class NotFoundError(APIException):
    """Вызывается, когда ресурс не найден."""

    def __init__(self, resource_type: str = "Question", resource_id: str | None = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type} not found",
            error_code=ErrorCode.NOT_FOUND,
        )
        self.resource_id = resource_id


class StoreFailureError(APIException):
    """Вызывается, когда обращение к хранилищу завершилось ошибкой."""

    def __init__(self, detail: str, error: str | None = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=ErrorCode.STORE_FAILURE,
            error=error,
        )


def error_body(message: str, error: str | None, debug: bool) -> dict:
    """Собирает тело ответа об ошибке."""
    body = {"success": False, "message": message}
    if debug and error:
        body["error"] = error
    return body


def register_exception_handlers(app: FastAPI, debug: bool) -> None:
    """Регистрирует обработчики ошибок, приводящие ответы к единому конверту."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail, exc.error, debug),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.warning(
            f"⚠️ Некорректные параметры: {request.method} {request.url.path} - {exc.errors()}"
        )
        error = "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
            for item in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body("Invalid request parameters", error, debug),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Неизвестный путь или метод - для клиента это один и тот же случай
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"success": False, "message": "Route not found"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            f"💥 Необработанная ошибка: {request.method} {request.url.path}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Something went wrong!", str(exc), debug),
        )
