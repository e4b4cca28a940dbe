"""
本文件包含数据库连接和会话管理的工具函数。

主要功能：
1. 数据库连接配置（从环境变量读取，避免硬编码）
2. 数据库会话管理
3. FastAPI依赖注入
4. 启动时建表
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from .config import get_database_url
from .db_base import Base

logger = logging.getLogger(__name__)

DATABASE_URL = get_database_url()

engine = create_engine(DATABASE_URL, pool_pre_ping=True)


def enable_sqlite_foreign_keys(bind) -> None:
    """SQLite 默认不检查外键，每个新连接上打开 foreign_keys，与 MySQL 行为一致。"""
    if bind.dialect.name != "sqlite":
        return

    @event.listens_for(bind, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI 依赖项：获取数据库会话（Session）。"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None) -> None:
    """
    根据 ORM 元数据创建所有数据表（已存在的表跳过）。

    正式环境推荐使用 migrations/ 下的 Alembic 脚本，这里用于开发环境和首次启动。
    """
    # 导入所有模型以确保它们被注册到 Base.metadata
    from .db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("[db][create-tables] tables=%s", ",".join(sorted(Base.metadata.tables)))
