"""
DTO 与映射测试
- 相等性只由 id 决定
- DTO <-> 实体的字段拷贝（只读字段、嵌套图片）
"""

import datetime

from dlife.db.models import AttendeeStatus, FitnessActivity, Rates
from dlife.schemas.attendee import AttendeeDTO
from dlife.schemas.fitness_activity import FitnessActivityDTO, PicsDTO
from dlife.schemas.rates import RatesDTO
from dlife.schemas.wechat_user import WechatUserDTO
from dlife.services.entity_services import (
    attendee_service,
    fitness_activity_service,
    rates_service,
)


class TestDtoEquality:
    """DTO 相等性测试"""

    def test_same_id_is_equal(self):
        a = WechatUserDTO(id=1, open_id="a")
        b = WechatUserDTO(id=1, open_id="b")

        assert a == b
        assert hash(a) == hash(b)

    def test_different_id_is_not_equal(self):
        assert WechatUserDTO(id=1, open_id="a") != WechatUserDTO(id=2, open_id="a")

    def test_unset_ids_are_never_equal(self):
        """所有字段都相同但 id 未设置时也不相等"""
        a = RatesDTO(rate=5, comments="好")
        b = RatesDTO(rate=5, comments="好")

        assert a != b
        assert a != RatesDTO(id=1, rate=5, comments="好")

    def test_different_types_are_not_equal(self):
        assert PicsDTO(id=1, src="x") != FitnessActivityDTO(id=1)
        assert PicsDTO(id=1, src="x") != 1

    def test_set_deduplicates_by_id(self):
        images = {PicsDTO(id=1, src="a"), PicsDTO(id=1, src="b"), PicsDTO(src="c"), PicsDTO(src="c")}

        assert len(images) == 3


class TestMapper:
    """DTO <-> 实体映射测试"""

    def test_to_entity_skips_read_only_fields(self):
        dto = RatesDTO(id=3, rate=4, create_time=datetime.datetime(2000, 1, 1))

        entity = rates_service.mapper.to_entity(dto)

        assert isinstance(entity, Rates)
        assert entity.id == 3
        assert entity.rate == 4
        assert entity.create_time is None

    def test_to_entity_converts_nested_images(self):
        dto = FitnessActivityDTO(title="t", images=[PicsDTO(src="a"), PicsDTO(id=7, src="b")])

        entity = fitness_activity_service.mapper.to_entity(dto)

        assert isinstance(entity, FitnessActivity)
        assert [pic.src for pic in entity.images] == ["a", "b"]
        assert entity.images[1].id == 7

    def test_to_dto_reads_orm_attributes(self):
        entity = Rates(id=9, rate=2, comments="一般")

        dto = rates_service.mapper.to_dto(entity)

        assert dto.id == 9
        assert dto.rate == 2
        assert dto.comments == "一般"

    def test_document_round_trip_uses_camel_case(self):
        dto = AttendeeDTO(id=5, wechat_user_id="u", status=AttendeeStatus.CHECKED_IN)
        mapper = attendee_service.mapper

        document = mapper.to_document(dto)

        assert document["wechatUserId"] == "u"
        assert document["status"] == "CHECKED_IN"
        assert mapper.from_document(document) == dto
