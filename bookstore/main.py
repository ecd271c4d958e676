#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, load_settings
from .dependencies import build_services
from .repositories import DataStore
from .routes import api_router, health
from .routes.errors import register_exception_handlers
from .sample_data import load_sample_data

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """配置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """创建FastAPI应用，每次调用都使用独立的内存存储"""
    settings = settings or load_settings()

    app = FastAPI(
        title=settings.app_name,
        description="书店目录、购物车与订单API（内存存储）",
        version=__version__,
    )

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = DataStore()
    if settings.seed_sample_data:
        load_sample_data(store)
    app.state.settings = settings
    app.state.services = build_services(store)

    # 注册路由
    app.include_router(health.router)
    app.include_router(api_router, prefix=settings.api_prefix)
    register_exception_handlers(app)

    logger.info(f"应用已创建: {settings.app_name} (API前缀 {settings.api_prefix})")
    return app


def run_server(settings: Optional[Settings] = None):
    """运行服务器"""
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run_server()
