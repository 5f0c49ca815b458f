"""
pytest配置文件，定义全局fixtures和测试配置
"""
import os
import tempfile
from pathlib import Path
from typing import Generator

# 应用默认数据库使用内存SQLite，必须在导入应用之前设置
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from book_inventory.main import app
from book_inventory.models.database import Database
from book_inventory.repositories.book_repository import BookRepository
from book_inventory.routes.book_routes import get_book_service
from book_inventory.services.book_service import BookService


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """创建临时数据库文件路径"""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as temp_file:
        temp_path = temp_file.name
    yield temp_path
    Path(temp_path).unlink(missing_ok=True)


@pytest.fixture
def test_db(temp_db_path: str) -> Generator[Database, None, None]:
    """创建测试数据库实例"""
    test_database = Database(f"sqlite:///{temp_db_path}")
    test_database.init_database()
    yield test_database
    test_database.dispose()


@pytest.fixture
def book_repository(test_db: Database) -> BookRepository:
    return BookRepository(test_db)


@pytest.fixture
def book_service(book_repository: BookRepository) -> BookService:
    return BookService(book_repository)


@pytest.fixture
def client(book_service: BookService) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端，书籍服务指向临时数据库"""
    app.dependency_overrides[get_book_service] = lambda: book_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_book_data():
    """示例书籍数据"""
    return {
        "title": "Fluent Python",
        "author": "Luciano Ramalho",
        "isbn": "978-1492056355",
        "price": 59.99,
        "quantity": 12,
        "description": "Clear, concise, and effective programming",
    }


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
