"""
应用配置

所有配置项从环境变量读取，导入时实例化一次
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """应用配置"""

    app_name: str = os.getenv("APP_NAME", "Book Inventory API")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # SQLAlchemy 数据库URL，默认使用本地SQLite文件
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./data/book_inventory.db")

    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # 分页
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))


settings = Settings()
