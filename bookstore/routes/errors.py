"""
异常到HTTP响应的统一映射
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import BookstoreError, InvalidInputError, NotFoundError
from ..schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, label: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=label, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    """业务异常 -> 404/400"""
    if isinstance(exc, NotFoundError):
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.label} - {exc.message}")
    return error_response(exc.status_code, exc.label, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体/路径参数校验失败 -> 400，只返回第一条错误"""
    message = "Request validation failed."
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))
        message = f"{field}: {first['msg']}" if field else first["msg"]
    logger.warning(f"{request.method} {request.url.path}: {InvalidInputError.label} - {message}")
    return error_response(InvalidInputError.status_code, InvalidInputError.label, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未处理异常 -> 500"""
    logger.exception(f"{request.method} {request.url.path} 处理失败: {exc}")
    return error_response(500, "Internal Server Error", str(exc) or "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
