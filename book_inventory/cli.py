#!/usr/bin/env python3
"""
命令行演示：创建示例书籍、搜索并打印统计
使用方法: python -m book_inventory.cli
"""
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from .exceptions import BookInventoryException
from .models.database import Database, get_database
from .repositories.book_repository import BookRepository
from .services.book_service import BookService

logger = logging.getLogger(__name__)

SAMPLE_BOOK = {
    "title": "Modern Python Development",
    "author": "John Doe",
    "isbn": "978-0123456789",
    "price": 29.99,
    "quantity": 10,
    "description": "A comprehensive guide to modern Python development practices.",
}


def run_demo(database: Database) -> None:
    """执行演示流程，业务异常打印后继续"""
    print("=== Book Inventory Management System ===")

    try:
        database.init_database()
        service = BookService(BookRepository(database))

        print("Creating sample book...")
        book = service.create_book(SAMPLE_BOOK)
        print(f"Book created with ID: {book.id}")

        print("Searching for books...")
        books = service.search_books("Python")
        print(f"Found {len(books)} books matching 'Python'")

        print("Book stats:")
        for key, value in service.get_book_stats().items():
            print(f"  {key}: {value}")
    except (BookInventoryException, SQLAlchemyError) as e:
        logger.debug("演示失败", exc_info=True)
        print(f"Error: {e}")


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    run_demo(get_database())
    return 0


if __name__ == "__main__":
    sys.exit(main())
