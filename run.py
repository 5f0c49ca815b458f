#!/usr/bin/env python3
"""
启动脚本 - 图书库存管理系统
使用方法: python run.py
"""

import logging
import uvicorn

from book_inventory.config import settings

# 配置日志
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

if __name__ == "__main__":
    logging.info("=" * 60)
    logging.info(f"启动{settings.app_name} v{settings.app_version}")
    logging.info(f"数据库: {settings.database_url}")
    logging.info("=" * 60)

    uvicorn.run(
        "book_inventory.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        reload_dirs=["book_inventory"],
        log_level="debug" if settings.debug else "info"
    )
