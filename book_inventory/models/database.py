#!/usr/bin/env python3
"""
数据库连接管理
使用SQLAlchemy引擎，默认SQLite持久化存储
"""
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.exc import DBAPIError

from ..database import get_database_url, metadata
from ..exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class Database:
    """数据库连接管理器"""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or get_database_url()
        self._prepare_sqlite_path(self.database_url)
        self.engine = create_engine(self.database_url)
        self._initialized = False
        self._init_lock = threading.Lock()

    @staticmethod
    def _prepare_sqlite_path(database_url: str) -> None:
        """SQLite文件库需要先创建所在目录"""
        url = make_url(database_url)
        if url.get_backend_name() != "sqlite":
            return
        if url.database and url.database != ":memory:" and not url.database.startswith("file:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> Connection:
        try:
            return self.engine.connect()
        except DBAPIError as e:
            logger.error(f"数据库连接失败: {e}")
            raise DatabaseConnectionError(f"Database connection failed: {e.orig}") from e

    @contextmanager
    def get_connection(self) -> Iterator[Connection]:
        """获取数据库连接的上下文管理器"""
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_database(self) -> None:
        """初始化数据库表结构 (幂等，每个实例只执行一次)"""
        with self._init_lock:
            if self._initialized:
                return
            with self.get_connection() as conn:
                metadata.create_all(conn, checkfirst=True)
            self._initialized = True
            logger.info(f"数据库初始化完成: {self.engine.url.render_as_string(hide_password=True)}")

    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """执行查询并返回结果"""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return [dict(row) for row in result.mappings().all()]

    def execute_scalar(self, query: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """执行查询并返回第一行第一列"""
        with self.get_connection() as conn:
            return conn.execute(text(query), params or {}).scalar()

    def execute_update(self, query: str, params: Optional[Dict[str, Any]] = None) -> int:
        """执行更新操作并返回影响的行数"""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.rowcount

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ping(self) -> bool:
        """检查数据库是否可用"""
        with self.get_connection() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


# 进程级默认数据库实例，首次使用时创建
_default_db: Optional[Database] = None
_default_lock = threading.Lock()


def get_database() -> Database:
    """获取默认数据库实例"""
    global _default_db
    with _default_lock:
        if _default_db is None:
            _default_db = Database()
        return _default_db
