"""
dlife 后端主应用文件。

本文件是FastAPI应用的入口点，负责：
1. 初始化日志
2. 创建FastAPI应用实例，启动时按配置建表
3. 注册全局异常处理和各实体的路由
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .logging_config import setup_logging
from .config import is_db_auto_create_enabled
from .errors import register_exception_handlers
from .utils import create_tables

from .api.rates import router as rates_router
from .api.attendees import router as attendees_router
from .api.fitness_activities import router as fitness_activities_router
from .api.pics import router as pics_router
from .api.wechat_users import router as wechat_users_router
from .api.search_admin import router as search_admin_router

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if is_db_auto_create_enabled():
        create_tables()
    yield


app = FastAPI(title="dlife API", lifespan=lifespan)
register_exception_handlers(app)

# 路由注册
app.include_router(rates_router)
app.include_router(attendees_router)
app.include_router(fitness_activities_router)
app.include_router(pics_router)
app.include_router(wechat_users_router)
app.include_router(search_admin_router)
