#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .exceptions import BookInventoryException
from .models.database import get_database
from .routes.book_routes import book_router
from .routes.responses import register_exception_handlers

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期：启动时初始化表结构"""
    logger.info("应用启动中...")
    get_database().init_database()
    logger.info("数据库连接就绪")
    try:
        yield
    finally:
        logger.info("应用关闭中...")


# 创建FastAPI应用
app = FastAPI(
    title=settings.app_name,
    description="图书库存管理系统",
    version=settings.app_version,
    lifespan=lifespan
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(book_router)
register_exception_handlers(app)


@app.get("/health")
async def health_check():
    """健康检查接口"""
    try:
        get_database().ping()
    except BookInventoryException as e:
        logger.error(f"健康检查失败: {e}")
        return JSONResponse(status_code=503, content={"status": "unhealthy", "database": "unavailable"})
    return {"status": "healthy", "database": "connected"}


def run_server(host: str = settings.api_host, port: int = settings.api_port):
    """运行服务器"""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
