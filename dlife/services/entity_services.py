"""
各实体的服务单例

实体名（entity_name）同时用作告警头中的实体标识和搜索索引名。
"""

from ..db.models import Attendee, FitnessActivity, Pics, Rates, WechatUser
from ..repositories.entity_repo import EntityRepository
from ..schemas.attendee import AttendeeDTO
from ..schemas.fitness_activity import FitnessActivityDTO, PicsDTO
from ..schemas.rates import RatesDTO
from ..schemas.wechat_user import WechatUserDTO
from .activity_service import FitnessActivityService, PicsService
from .entity_service import EntityService
from .mapper import EntityMapper


def _build(entity_name, model, dto_class, nested=None, service_class=EntityService, **kwargs) -> EntityService:
    return service_class(
        entity_name,
        EntityRepository(model, entity_name),
        EntityMapper(model, dto_class, nested),
        **kwargs,
    )


pics_mapper = EntityMapper(Pics, PicsDTO)

rates_service = _build("rates", Rates, RatesDTO)
attendee_service = _build("attendee", Attendee, AttendeeDTO)
pics_service = _build("pics", Pics, PicsDTO, service_class=PicsService)
fitness_activity_service = _build(
    "fitnessActivity",
    FitnessActivity,
    FitnessActivityDTO,
    nested={"images": pics_mapper},
    service_class=FitnessActivityService,
    pics_service=pics_service,
)
# 图片变化时需要重写所属活动的索引文档
pics_service.activity_service = fitness_activity_service
wechat_user_service = _build("wechatUser", WechatUser, WechatUserDTO)

ALL_SERVICES = [
    rates_service,
    attendee_service,
    pics_service,
    fitness_activity_service,
    wechat_user_service,
]
