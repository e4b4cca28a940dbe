"""
REST 资源路由生成器

每种实体都暴露同一组接口（以 rates 为例）：
1. POST   /api/rates               - 新建，已带ID返回400，成功返回201 + Location
2. PUT    /api/rates               - 整体更新，不带ID时等同于新建
3. GET    /api/rates               - 全部列表（不分页）
4. GET    /api/rates/{id}          - 按ID获取，不存在返回404
5. DELETE /api/rates/{id}          - 删除，幂等，始终返回200
6. GET    /api/_search/rates?query - 转发给搜索引擎的全文检索

成功响应都带有告警头（见 header_util）。
"""

from typing import Type
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from .. import header_util
from ..clients.search_client import SearchIndexError, get_search_client
from ..errors import BadRequestAlertError
from ..schemas.base import EntityDTO
from ..services.entity_service import EntityService
from ..utils import get_db

logger = logging.getLogger(__name__)


def build_resource_router(
    path: str,
    service: EntityService,
    dto_class: Type[EntityDTO],
    label: str,
    tag: str,
) -> APIRouter:
    """
    为一种实体生成标准的 REST 路由。

    参数：
        path: URL 中的资源路径，如 "rates"、"wechat-users"
        service: 该实体的 EntityService
        dto_class: 请求/响应使用的 DTO 类型
        label: 中文名称，用于错误提示
        tag: OpenAPI 文档标签
    """
    entity_name = service.entity_name
    router = APIRouter(prefix="/api", tags=[tag])

    @router.post(f"/{path}", response_model=dto_class, status_code=status.HTTP_201_CREATED)
    def create(
        dto: dto_class,
        response: Response,
        db: Session = Depends(get_db),
        search=Depends(get_search_client),
    ):
        logger.debug("[rest][%s-create] dto=%r", entity_name, dto)
        if dto.id is not None:
            raise BadRequestAlertError(f"A new {entity_name} cannot already have an ID", entity_name, "idexists")
        result = service.save(db, dto, search)
        response.status_code = status.HTTP_201_CREATED
        response.headers["Location"] = f"/api/{path}/{result.id}"
        response.headers.update(header_util.create_entity_creation_alert(entity_name, str(result.id)))
        return result

    @router.put(f"/{path}", response_model=dto_class)
    def update(
        dto: dto_class,
        response: Response,
        db: Session = Depends(get_db),
        search=Depends(get_search_client),
    ):
        logger.debug("[rest][%s-update] dto=%r", entity_name, dto)
        if dto.id is None:
            return create(dto, response, db, search)
        result = service.save(db, dto, search)
        response.headers.update(header_util.create_entity_update_alert(entity_name, str(dto.id)))
        return result

    @router.get(f"/{path}", response_model=list[dto_class])
    def get_all(db: Session = Depends(get_db)):
        logger.debug("[rest][%s-list]", entity_name)
        return service.find_all(db)

    @router.get(f"/{path}/{{entity_id}}", response_model=dto_class)
    def get_one(entity_id: int, db: Session = Depends(get_db)):
        logger.debug("[rest][%s-get] id=%s", entity_name, entity_id)
        result = service.find_one(db, entity_id)
        if result is None:
            raise HTTPException(status_code=404, detail=f"{label}未找到")
        return result

    @router.delete(f"/{path}/{{entity_id}}")
    def delete(
        entity_id: int,
        db: Session = Depends(get_db),
        search=Depends(get_search_client),
    ):
        logger.debug("[rest][%s-delete] id=%s", entity_name, entity_id)
        service.delete(db, entity_id, search)
        return Response(
            status_code=status.HTTP_200_OK,
            headers=header_util.create_entity_deletion_alert(entity_name, str(entity_id)),
        )

    @router.get(f"/_search/{path}", response_model=list[dto_class])
    def search_entities(
        query: str = Query(..., description="全文检索语句，语法由搜索引擎决定"),
        search=Depends(get_search_client),
    ):
        logger.debug("[rest][%s-search] query=%s", entity_name, query)
        try:
            return service.search(query, search)
        except SearchIndexError as e:
            logger.exception("[search-error][%s-search] query=%s", entity_name, query)
            raise HTTPException(
                status_code=503,
                detail=f"搜索服务不可用: {e.message}",
                headers=header_util.create_failure_alert(entity_name, "searchunavailable"),
            )

    return router
