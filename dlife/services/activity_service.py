"""
Activity Service（健身活动与活动图片服务）

活动拥有自己的图片集合，图片同时存在于两个索引中：
- pics 索引：每张图片一条文档
- fitnessActivity 索引：活动文档内嵌的 images 列表

因此两边的写入都要同步另一边的索引：
1. 保存活动：写入当前全部图片，移除被替换掉的旧图片
2. 删除活动：移除该活动原有的全部图片（删除前先读出图片ID）
3. 保存/删除图片：重建所属活动（含原所属活动）的文档
"""

from typing import Iterable, Optional, Set
import logging

from sqlalchemy.orm import Session

from ..schemas.base import EntityDTO
from .entity_service import EntityService

logger = logging.getLogger(__name__)


class FitnessActivityService(EntityService):
    """健身活动服务：同步维护 pics 索引"""

    def __init__(self, entity_name, repository, mapper, pics_service: "PicsService"):
        super().__init__(entity_name, repository, mapper)
        self.pics_service = pics_service

    def save(self, db: Session, dto: EntityDTO, search) -> EntityDTO:
        old_image_ids = self._image_ids(db, dto.id)
        result = super().save(db, dto, search)
        for image in result.images:
            self.pics_service._index(search, image)
        removed = old_image_ids - {image.id for image in result.images}
        for image_id in sorted(removed):
            self.pics_service._unindex(search, image_id)
        return result

    def delete(self, db: Session, entity_id: int, search) -> None:
        old_image_ids = self._image_ids(db, entity_id)
        super().delete(db, entity_id, search)
        for image_id in sorted(old_image_ids):
            self.pics_service._unindex(search, image_id)

    def refresh_documents(self, db: Session, search, activity_ids: Iterable[Optional[int]]) -> None:
        """按主库重写指定活动的索引文档（活动已不存在时跳过）"""
        for activity_id in sorted({aid for aid in activity_ids if aid is not None}):
            dto = self.find_one(db, activity_id)
            if dto is not None:
                self._index(search, dto)

    def _image_ids(self, db: Session, activity_id: Optional[int]) -> Set[int]:
        if activity_id is None:
            return set()
        activity = self.repository.find_by_id(db, activity_id)
        if activity is None:
            return set()
        return {image.id for image in activity.images}


class PicsService(EntityService):
    """活动图片服务：图片变化后重写所属活动的索引文档"""

    activity_service: Optional[FitnessActivityService] = None

    def save(self, db: Session, dto: EntityDTO, search) -> EntityDTO:
        old_activity_id = self._activity_id(db, dto.id)
        result = super().save(db, dto, search)
        self._refresh_activities(db, search, old_activity_id, result.activity_id)
        return result

    def delete(self, db: Session, entity_id: int, search) -> None:
        old_activity_id = self._activity_id(db, entity_id)
        super().delete(db, entity_id, search)
        self._refresh_activities(db, search, old_activity_id)

    def _activity_id(self, db: Session, pic_id: Optional[int]) -> Optional[int]:
        if pic_id is None:
            return None
        pic = self.repository.find_by_id(db, pic_id)
        return pic.activity_id if pic is not None else None

    def _refresh_activities(self, db: Session, search, *activity_ids: Optional[int]) -> None:
        if self.activity_service is None:
            logger.warning("[pics][refresh] activity service not wired, skip activity_ids=%s", activity_ids)
            return
        self.activity_service.refresh_documents(db, search, activity_ids)
