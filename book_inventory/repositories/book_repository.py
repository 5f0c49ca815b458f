"""
书籍数据访问层
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from ..database import books_table
from ..exceptions import ConstraintError, DuplicateBookError
from ..models.book import Book
from ..models.database import Database, get_database

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "!"


def escape_like(value: str) -> str:
    """转义LIKE通配符，使关键字按字面匹配"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class BookRepository:
    """书籍仓库类"""

    def __init__(self, database: Optional[Database] = None):
        self.db = database or get_database()

    @staticmethod
    def _params(book: Book) -> Dict[str, Any]:
        return {
            "title": book.title,
            "author": book.author,
            "isbn": book.isbn,
            "price": float(book.price),
            "quantity": book.quantity,
            "description": book.description,
        }

    @staticmethod
    def _constraint_error(book: Book, error: IntegrityError) -> ConstraintError:
        if "isbn" in str(error.orig).lower():
            return DuplicateBookError(f"Book with ISBN {book.isbn} already exists")
        return ConstraintError(f"Constraint violation: {error.orig}")

    def create(self, book: Book) -> Book:
        """创建书籍，返回带ID的书籍"""
        try:
            with self.db.get_connection() as conn:
                result = conn.execute(books_table.insert().values(**self._params(book)))
                book_id = result.inserted_primary_key[0]
        except IntegrityError as e:
            logger.warning(f"插入书籍失败: ISBN={book.isbn}, {e.orig}")
            raise self._constraint_error(book, e) from e

        logger.info(f"成功插入书籍: ID={book_id}, ISBN={book.isbn}, 标题={book.title}")
        return self.find_by_id(book_id)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """根据ID获取书籍"""
        query = "SELECT * FROM books WHERE id = :id"
        results = self.db.execute_query(query, {"id": book_id})
        return Book.from_dict(results[0]) if results else None

    def find_all(self, limit: int = 100, offset: int = 0) -> List[Book]:
        """分页获取书籍，按创建时间倒序"""
        query = """
            SELECT * FROM books
            ORDER BY created_at DESC, id DESC
            LIMIT :limit OFFSET :offset
        """
        rows = self.db.execute_query(query, {"limit": limit, "offset": offset})
        return [Book.from_dict(row) for row in rows]

    def search(self, keyword: str) -> List[Book]:
        """按标题、作者或ISBN模糊搜索（不区分大小写）"""
        query = f"""
            SELECT * FROM books
            WHERE LOWER(title) LIKE LOWER(:pattern) ESCAPE '{LIKE_ESCAPE}'
               OR LOWER(author) LIKE LOWER(:pattern) ESCAPE '{LIKE_ESCAPE}'
               OR LOWER(isbn) LIKE LOWER(:pattern) ESCAPE '{LIKE_ESCAPE}'
            ORDER BY title ASC
        """
        rows = self.db.execute_query(query, {"pattern": f"%{escape_like(keyword)}%"})
        return [Book.from_dict(row) for row in rows]

    def update(self, book: Book) -> bool:
        """按ID整体替换书籍字段"""
        query = """
            UPDATE books
            SET title = :title, author = :author, isbn = :isbn,
                price = :price, quantity = :quantity, description = :description,
                updated_at = CURRENT_TIMESTAMP
            WHERE id = :id
        """
        params = self._params(book)
        params["id"] = book.id
        try:
            updated = self.db.execute_update(query, params) > 0
        except IntegrityError as e:
            logger.warning(f"更新书籍失败: ID={book.id}, {e.orig}")
            raise self._constraint_error(book, e) from e

        if updated:
            logger.info(f"成功更新书籍: ID={book.id}")
        return updated

    def delete(self, book_id: int) -> bool:
        """删除书籍"""
        deleted = self.db.execute_update("DELETE FROM books WHERE id = :id", {"id": book_id}) > 0
        if deleted:
            logger.info(f"成功删除书籍: ID={book_id}")
        return deleted

    def count(self) -> int:
        """获取书籍总数"""
        return int(self.db.execute_scalar("SELECT COUNT(*) FROM books") or 0)
