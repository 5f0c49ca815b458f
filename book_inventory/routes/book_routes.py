#!/usr/bin/env python3
"""
书籍管理路由
"""
import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from ..config import settings
from ..exceptions import BookValidationError
from ..models.database import get_database
from ..repositories.book_repository import BookRepository
from ..services.book_service import BookService
from .responses import error_response, success_response

logger = logging.getLogger(__name__)

# OFFSET 需落在 64 位整数范围内
MAX_PAGE = 2 ** 31 - 1

# 创建路由
book_router = APIRouter(prefix="/books", tags=["books"])


def get_book_service() -> BookService:
    """书籍服务依赖"""
    return BookService(BookRepository(get_database()))


def _parse_id(segment: Optional[str]) -> Optional[int]:
    """路径中的数字ID，非数字返回None"""
    if segment and segment.isascii() and segment.isdigit():
        return int(segment)
    return None


async def _read_json(request: Request) -> Dict[str, Any]:
    body = await request.body()
    try:
        data = json.loads(body)
    except ValueError:
        raise BookValidationError("Invalid JSON input")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BookValidationError("Invalid JSON input")
    return data


def _collection(service: BookService, search: Optional[str], stats: Optional[str],
                page: int, per_page: int):
    """书籍集合查询：搜索 > 统计 > 分页列表"""
    if search is not None:
        books = service.search_books(search)
        return success_response([book.to_dict() for book in books])
    if stats is not None:
        return success_response(service.get_book_stats())
    books = service.get_all_books(page, per_page)
    return success_response([book.to_dict() for book in books])


@book_router.get("")
async def list_books(
    search: Optional[str] = None,
    stats: Optional[str] = None,
    page: int = Query(1, le=MAX_PAGE),
    per_page: int = Query(settings.default_page_size, le=MAX_PAGE),
    service: BookService = Depends(get_book_service),
):
    """获取书籍列表（支持搜索、统计和分页）"""
    return _collection(service, search, stats, page, per_page)


@book_router.get("/{book_id}")
async def get_book(
    book_id: str,
    search: Optional[str] = None,
    stats: Optional[str] = None,
    page: int = Query(1, le=MAX_PAGE),
    per_page: int = Query(settings.default_page_size, le=MAX_PAGE),
    service: BookService = Depends(get_book_service),
):
    """获取单本书籍"""
    parsed_id = _parse_id(book_id)
    if parsed_id is None:
        return _collection(service, search, stats, page, per_page)

    book = service.get_book(parsed_id)
    if not book:
        return error_response("Book not found", 404)
    return success_response(book.to_dict())


@book_router.post("")
async def create_book(request: Request, service: BookService = Depends(get_book_service)):
    """创建书籍"""
    data = await _read_json(request)
    book = service.create_book(data)
    return success_response(book.to_dict(), 201)


@book_router.put("")
@book_router.delete("")
async def book_id_required():
    """PUT/DELETE 缺少书籍ID"""
    return error_response("Book ID required", 400)


@book_router.put("/{book_id}")
async def update_book(book_id: str, request: Request,
                      service: BookService = Depends(get_book_service)):
    """更新书籍"""
    parsed_id = _parse_id(book_id)
    if parsed_id is None:
        return error_response("Book ID required", 400)

    data = await _read_json(request)
    if service.update_book(parsed_id, data):
        return success_response({"message": "Book updated successfully"})
    logger.error(f"更新书籍失败: ID={parsed_id}")
    return error_response("Failed to update book", 500)


@book_router.delete("/{book_id}")
async def delete_book(book_id: str,
                      service: BookService = Depends(get_book_service)):
    """删除书籍"""
    parsed_id = _parse_id(book_id)
    if parsed_id is None:
        return error_response("Book ID required", 400)

    if service.delete_book(parsed_id):
        return success_response({"message": "Book deleted successfully"})
    logger.error(f"删除书籍失败: ID={parsed_id}")
    return error_response("Failed to delete book", 500)
