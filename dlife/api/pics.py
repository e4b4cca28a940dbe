"""
Pics API routes

包含：
- POST/PUT/GET /api/pics
- GET/DELETE /api/pics/{id}
- GET /api/_search/pics?query=...

图片通常随活动一起提交（FitnessActivity.images），这里用于单独维护。
"""

from ..schemas.fitness_activity import PicsDTO
from ..services.entity_services import pics_service
from .resource import build_resource_router

router = build_resource_router("pics", pics_service, PicsDTO, label="图片", tag="活动图片")
