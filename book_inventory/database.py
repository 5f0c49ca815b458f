"""
数据库表结构定义
"""
from sqlalchemy import (
    Column, DateTime, Index, Integer, MetaData, Numeric, String, Table, Text, func, text
)

from .config import settings

# 表结构元数据
metadata = MetaData()

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), nullable=False),
    Column("isbn", String(20), nullable=False),
    Column("price", Numeric(10, 2), nullable=False, server_default=text("0")),
    Column("quantity", Integer, nullable=False, server_default=text("0")),
    Column("description", Text),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
    Column("updated_at", DateTime, server_default=func.current_timestamp()),
    Index("idx_books_isbn", "isbn", unique=True),
    Index("idx_books_title", "title"),
    Index("idx_books_author", "author"),
)


def get_database_url():
    """获取数据库URL"""
    return settings.database_url
