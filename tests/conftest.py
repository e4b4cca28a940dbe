"""
pytest配置文件，定义测试环境和共享的测试夹具（fixtures）。

主要功能：
1. 使用内存 SQLite（StaticPool）作为测试数据库，每个用例重新建表
2. 用进程内的假搜索索引替换外部搜索引擎
3. 提供FastAPI测试客户端
4. 提供测试数据样本
"""

import json
import os
from collections import defaultdict

# 必须在导入 dlife 之前设置，避免启动时连接真实的 MySQL / 搜索引擎
os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('DB_AUTO_CREATE', 'false')
os.environ.setdefault('SEARCH_ENABLED', 'false')

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dlife.main import app
from dlife.utils import enable_sqlite_foreign_keys, get_db
from dlife.db_base import Base
from dlife.db import models  # noqa: F401
from dlife.clients.search_client import get_search_client

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class InMemorySearchClient:
    """测试用的搜索索引：按子串匹配文档 JSON，接口与 SearchClient 一致"""

    def __init__(self):
        self.indices = defaultdict(dict)
        self.queries = []

    def index(self, index, doc_id, document):
        self.indices[index][str(doc_id)] = document

    def delete(self, index, doc_id):
        self.indices[index].pop(str(doc_id), None)

    def clear(self, index):
        self.indices[index].clear()

    def search(self, index, query, size=1000):
        self.queries.append((index, query))
        needle = query.lower()
        return [
            doc for doc in self.indices[index].values()
            if needle in json.dumps(doc, ensure_ascii=False).lower()
        ][:size]


@pytest.fixture
def db_session():
    """提供数据库会话，用例结束后删表"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def search_index():
    return InMemorySearchClient()


@pytest.fixture
def client(db_session, search_index):
    """提供FastAPI测试客户端"""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_search_client] = lambda: search_index
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_wechat_user_data():
    return {
        "openId": "o6_bmjrPTlm6_2sgVt7hMZOPfL2M",
        "nickName": "跑步的小王",
        "avatar": "https://thirdwx.qlogo.cn/mmopen/avatar.png",
        "mobile": "13800138000",
        "project": "DLife",
        "seat": "A-12",
        "bio": "每天五公里",
        "skill": "跑步,游泳",
        "sex": 1,
        "companyRole": "工程师",
    }


@pytest.fixture
def sample_activity_data():
    return {
        "title": "周末夜跑",
        "description": "滨江步道 10km",
        "wechatUserId": "o6_bmjrPTlm6_2sgVt7hMZOPfL2M",
        "nickName": "跑步的小王",
        "project": "DLife",
        "companyRole": "工程师",
        "signStartTime": "2024-05-01T08:00:00",
        "signEndTime": "2024-05-03T20:00:00",
        "activityStartTime": "2024-05-04T19:00:00",
        "activityEndTime": "2024-05-04T21:00:00",
        "attendCount": 0,
        "images": [
            {"src": "https://img.example.com/run-1.jpg"},
            {"src": "https://img.example.com/run-2.jpg"},
        ],
    }


@pytest.fixture
def sample_rates_data():
    return {
        "activityId": 1,
        "wechatUserId": "o6_bmjrPTlm6_2sgVt7hMZOPfL2M",
        "nickName": "跑步的小王",
        "rate": 5,
        "comments": "配速舒服，下次还来",
    }
