#!/usr/bin/env python3
"""
统一响应格式与异常处理
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..exceptions import BookInventoryException, BookNotFoundError, BookValidationError

logger = logging.getLogger(__name__)

HTTP_ERROR_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


class SuccessResponse(BaseModel):
    """成功响应"""
    success: bool = True
    data: Any = None
    timestamp: str


class ErrorResponse(BaseModel):
    """错误响应"""
    success: bool = False
    error: str
    errors: Optional[List[str]] = None
    timestamp: str


def now_iso() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    body = SuccessResponse(data=data, timestamp=now_iso())
    return JSONResponse(status_code=status_code, content=body.model_dump())


def error_response(message: str, status_code: int = 400,
                   errors: Optional[List[str]] = None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=message, errors=errors, timestamp=now_iso())
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True),
                        headers=headers)


async def book_exception_handler(request: Request, exc: BookInventoryException) -> JSONResponse:
    """业务异常 -> 400/404"""
    if isinstance(exc, BookNotFoundError):
        return error_response(str(exc), 404)
    if isinstance(exc, BookValidationError):
        return error_response(str(exc), 400, errors=exc.errors)
    logger.warning(f"请求失败 {request.method} {request.url.path}: {exc}")
    return error_response(str(exc), 400)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
    return error_response(message, exc.status_code, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """查询参数格式错误 -> 400"""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        errors.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return error_response(errors[0] if errors else "Invalid request", 400, errors=errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"未处理异常 {request.method} {request.url.path}: {exc}")
    return error_response("Internal server error", 500)


def register_exception_handlers(app: FastAPI) -> None:
    """注册统一异常处理"""
    app.add_exception_handler(BookInventoryException, book_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
