"""
Search admin API routes

包含：
- POST /api/_reindex：以数据库为准重建所有实体的搜索索引
"""

from typing import Dict
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..clients.search_client import SearchIndexError, get_search_client
from ..services.entity_services import ALL_SERVICES
from ..utils import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["搜索"])


@router.post("/_reindex", response_model=Dict[str, int])
def reindex_all(db: Session = Depends(get_db), search=Depends(get_search_client)):
    """重建索引，返回每种实体写入的文档数"""
    counts = {}
    try:
        for service in ALL_SERVICES:
            counts[service.entity_name] = service.reindex(db, search)
    except SearchIndexError as e:
        logger.exception("[search-error][reindex] done=%s", counts)
        raise HTTPException(status_code=503, detail=f"搜索服务不可用: {e.message}")
    return counts
