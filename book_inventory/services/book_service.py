"""
书籍业务服务层
"""
import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import settings
from ..exceptions import BookNotFoundError, BookValidationError
from ..models.book import Book
from ..repositories.book_repository import BookRepository
from ..utils.validators import (
    parse_price, parse_quantity, validate_book_data, validate_search_query
)

logger = logging.getLogger(__name__)


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    def create_book(self, book_data: Dict[str, Any]) -> Book:
        """创建书籍"""
        book = self._build_book(book_data)
        return self.book_repository.create(book)

    def update_book(self, book_id: int, book_data: Dict[str, Any]) -> bool:
        """整体更新书籍字段"""
        existing_book = self.book_repository.find_by_id(book_id)
        if not existing_book:
            raise BookNotFoundError("Book not found")

        book = replace(self._build_book(book_data), id=existing_book.id)
        return self.book_repository.update(book)

    def get_book(self, book_id: int) -> Optional[Book]:
        """根据ID获取书籍"""
        return self.book_repository.find_by_id(book_id)

    def get_all_books(self, page: int = 1, per_page: int = 20) -> List[Book]:
        """分页获取书籍，page从1开始"""
        errors = []
        if page < 1:
            errors.append("Page must be a positive integer")
        if per_page < 1:
            errors.append("Per page must be a positive integer")
        if errors:
            raise BookValidationError(errors)

        per_page = min(per_page, settings.max_page_size)
        offset = (page - 1) * per_page
        return self.book_repository.find_all(per_page, offset)

    def search_books(self, query: str) -> List[Book]:
        """搜索书籍"""
        errors = validate_search_query(query)
        if errors:
            raise BookValidationError(errors)
        return self.book_repository.search(query.strip())

    def delete_book(self, book_id: int) -> bool:
        """删除书籍"""
        book = self.book_repository.find_by_id(book_id)
        if not book:
            raise BookNotFoundError("Book not found")
        return self.book_repository.delete(book_id)

    def get_book_stats(self) -> Dict[str, Any]:
        """书籍统计"""
        return {
            "total_books": self.book_repository.count(),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _build_book(self, book_data: Dict[str, Any]) -> Book:
        """验证数据并构建书籍对象"""
        if not isinstance(book_data, dict):
            raise BookValidationError("Book data must be an object")
        errors = validate_book_data(book_data)
        if errors:
            logger.info(f"书籍数据验证失败: {errors}")
            raise BookValidationError(errors)

        return Book(
            title=book_data["title"],
            author=book_data["author"],
            isbn=book_data["isbn"],
            price=parse_price(book_data["price"]),
            quantity=parse_quantity(book_data["quantity"]),
            description=book_data.get("description") or "",
        )
