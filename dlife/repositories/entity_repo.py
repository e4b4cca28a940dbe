"""Entity Repository（实体数据访问层）

职责：
- 按实体类型封装标准的增删改查：find_by_id / find_all / save / delete_by_id
- 唯一性、非空等约束交给表结构，数据库报错统一转换为 StorageConstraintViolation
"""

from typing import Any, List, Optional, Type
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import StorageConstraintViolation

logger = logging.getLogger(__name__)


class EntityRepository:
    def __init__(self, model: Type[Any], entity_name: str):
        self.model = model
        self.entity_name = entity_name

    def find_by_id(self, db: Session, entity_id: int) -> Optional[Any]:
        return db.query(self.model).filter(self.model.id == entity_id).first()

    def find_all(self, db: Session) -> List[Any]:
        return db.query(self.model).order_by(self.model.id).all()

    def save(self, db: Session, entity: Any) -> Any:
        """保存实体：id 为空时插入；否则按 id 整体替换（库中不存在该 id 时按该 id 插入）。"""
        try:
            merged = db.merge(entity)
            db.commit()
            db.refresh(merged)
            return merged
        except IntegrityError as e:
            db.rollback()
            logger.warning("[db-error][%s-save] err=%s", self.entity_name, e.orig)
            raise StorageConstraintViolation(self.entity_name, str(e.orig)) from e

    def delete_by_id(self, db: Session, entity_id: int) -> bool:
        """删除实体；不存在时返回 False，不报错。"""
        entity = self.find_by_id(db, entity_id)
        if entity is None:
            return False
        try:
            db.delete(entity)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning("[db-error][%s-delete] id=%s err=%s", self.entity_name, entity_id, e.orig)
            raise StorageConstraintViolation(self.entity_name, str(e.orig)) from e
        return True
