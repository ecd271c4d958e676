#!/usr/bin/env python3
"""
启动脚本 - 书店目录与订单API
使用方法: python run.py
"""
import logging

import uvicorn

from bookstore.config import load_settings
from bookstore.main import configure_logging

if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)

    # 设置特定模块的日志级别
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    logging.info("=" * 60)
    logging.info(f"启动 {settings.app_name}")
    logging.info(f"监听地址: {settings.host}:{settings.port}")
    logging.info(f"日志级别: {settings.log_level}")
    logging.info("=" * 60)

    uvicorn.run(
        "bookstore.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
