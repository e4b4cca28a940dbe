"""
Entity Service（实体服务层）

职责：
- 在 DTO 与实体之间转换后，把读写请求转发给 EntityRepository
- 主库提交成功后，同步把 DTO 写入搜索索引；删除时同步移除索引文档
- 全文检索直接转发给搜索引擎，结果按索引文档还原为 DTO
- reindex：以主库为准重建某个实体的全部索引

索引写入失败只记录日志、不影响主库结果（主库是唯一可信来源），可通过 reindex 修复。
"""

from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..clients.search_client import SearchIndexError
from ..repositories.entity_repo import EntityRepository
from ..schemas.base import EntityDTO
from .mapper import EntityMapper

logger = logging.getLogger(__name__)


class EntityService:
    """通用实体服务，每种实体一个实例"""

    def __init__(self, entity_name: str, repository: EntityRepository, mapper: EntityMapper):
        self.entity_name = entity_name
        self.repository = repository
        self.mapper = mapper

    def save(self, db: Session, dto: EntityDTO, search) -> EntityDTO:
        """保存（新建或整体替换）并返回保存后的 DTO"""
        entity = self.mapper.to_entity(dto)
        saved = self.repository.save(db, entity)
        result = self.mapper.to_dto(saved)
        self._index(search, result)
        return result

    def find_all(self, db: Session) -> List[EntityDTO]:
        return [self.mapper.to_dto(entity) for entity in self.repository.find_all(db)]

    def find_one(self, db: Session, entity_id: int) -> Optional[EntityDTO]:
        entity = self.repository.find_by_id(db, entity_id)
        if entity is None:
            return None
        return self.mapper.to_dto(entity)

    def delete(self, db: Session, entity_id: int, search) -> None:
        """删除实体（幂等）"""
        deleted = self.repository.delete_by_id(db, entity_id)
        if not deleted:
            logger.debug("[%s][delete] id=%s not found, nothing to do", self.entity_name, entity_id)
        self._unindex(search, entity_id)

    def search(self, query: str, search) -> List[EntityDTO]:
        """全文检索；SearchIndexError 交给调用方处理"""
        documents = search.search(self.entity_name, query)
        return [self.mapper.from_document(doc) for doc in documents]

    def reindex(self, db: Session, search) -> int:
        """清空索引后按主库全部数据重建，返回写入的文档数"""
        search.clear(self.entity_name)
        count = 0
        for dto in self.find_all(db):
            search.index(self.entity_name, dto.id, self.mapper.to_document(dto))
            count += 1
        logger.info("[search][reindex] entity=%s count=%s", self.entity_name, count)
        return count

    def _index(self, search, dto: EntityDTO) -> None:
        try:
            search.index(self.entity_name, dto.id, self.mapper.to_document(dto))
        except SearchIndexError as e:
            logger.warning("[search-error][%s-index] id=%s err=%s", self.entity_name, dto.id, e)

    def _unindex(self, search, entity_id: int) -> None:
        try:
            search.delete(self.entity_name, entity_id)
        except SearchIndexError as e:
            logger.warning("[search-error][%s-unindex] id=%s err=%s", self.entity_name, entity_id, e)
