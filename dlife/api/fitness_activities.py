"""
FitnessActivity API routes

包含：
- POST/PUT/GET /api/fitness-activities
- GET/DELETE /api/fitness-activities/{id}
- GET /api/_search/fitness-activities?query=...

活动的 images 随活动整体替换：PUT 时未出现在列表中的旧图片会被删除。
"""

from ..schemas.fitness_activity import FitnessActivityDTO
from ..services.entity_services import fitness_activity_service
from .resource import build_resource_router

router = build_resource_router("fitness-activities", fitness_activity_service, FitnessActivityDTO, label="健身活动", tag="健身活动")
