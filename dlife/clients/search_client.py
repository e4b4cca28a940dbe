"""搜索引擎 API 客户端（最小封装）

功能：
- 对接 Elasticsearch 兼容的 REST 接口；
- 提供文档写入、删除、清空和 query_string 全文检索；
- 查询语法与排序完全由搜索引擎决定，这里只做转发。

写入使用 refresh=true，保存后立即可搜索。
"""

from typing import Any, Dict, List, Optional
import logging
import requests

from ..config import (
    SEARCH_INDEX_PREFIX,
    SEARCH_TIMEOUT,
    SEARCH_URL,
    is_search_enabled,
)


logger = logging.getLogger(__name__)


class SearchIndexError(Exception):
    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(f"Search engine error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class SearchClient:
    def __init__(self, base_url: str, index_prefix: str = "", timeout: Optional[int] = None):
        self.base_url = base_url.rstrip("/")
        self.index_prefix = index_prefix
        self.timeout = timeout or SEARCH_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def index_name(self, index: str) -> str:
        return f"{self.index_prefix}{index}".lower()

    def _request(
        self,
        method: str,
        path: str,
        ok_statuses=(200, 201),
        **kwargs,
    ) -> Optional[requests.Response]:
        """内部请求封装：网络异常或非预期状态码统一抛 SearchIndexError；404 返回 None。"""
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise SearchIndexError(None, str(e)) from e
        if resp.status_code == 404:
            return None
        if resp.status_code not in ok_statuses:
            raise SearchIndexError(resp.status_code, resp.text)
        return resp

    def index(self, index: str, doc_id: Any, document: Dict[str, Any]) -> None:
        """写入（或整体覆盖）一条文档。"""
        self._request(
            "PUT",
            f"/{self.index_name(index)}/_doc/{doc_id}",
            params={"refresh": "true"},
            json=document,
        )

    def delete(self, index: str, doc_id: Any) -> None:
        """删除一条文档；文档或索引不存在时静默返回。"""
        self._request(
            "DELETE",
            f"/{self.index_name(index)}/_doc/{doc_id}",
            params={"refresh": "true"},
        )

    def clear(self, index: str) -> None:
        """清空索引中的全部文档（保留索引本身）。"""
        self._request(
            "POST",
            f"/{self.index_name(index)}/_delete_by_query",
            params={"refresh": "true", "conflicts": "proceed"},
            json={"query": {"match_all": {}}},
        )

    def search(self, index: str, query: str, size: int = 1000) -> List[Dict[str, Any]]:
        """query_string 检索，返回命中文档的 _source 列表；索引不存在时返回空列表。"""
        resp = self._request(
            "POST",
            f"/{self.index_name(index)}/_search",
            json={"query": {"query_string": {"query": query}}, "size": size},
        )
        if resp is None:
            return []
        hits = resp.json().get("hits", {}).get("hits", [])
        return [hit.get("_source", {}) for hit in hits]

    def close(self) -> None:
        self.session.close()


class DisabledSearchClient:
    """关闭搜索时使用：写入/删除为空操作，检索恒返回空列表。"""

    def index(self, index: str, doc_id: Any, document: Dict[str, Any]) -> None:
        return None

    def delete(self, index: str, doc_id: Any) -> None:
        return None

    def clear(self, index: str) -> None:
        return None

    def search(self, index: str, query: str, size: int = 1000) -> List[Dict[str, Any]]:
        return []

    def close(self) -> None:
        return None


def get_search_client():
    """
    FastAPI 依赖项：每个请求创建自己的搜索客户端，请求结束后关闭。

    requests.Session 不是线程安全的，同步路由跑在线程池里，客户端不跨请求共享。
    """
    if not is_search_enabled():
        yield DisabledSearchClient()
        return
    client = SearchClient(SEARCH_URL, SEARCH_INDEX_PREFIX)
    try:
        yield client
    finally:
        client.close()
