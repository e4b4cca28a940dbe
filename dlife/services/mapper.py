"""
DTO 与 ORM 实体之间的字段拷贝

- to_entity：DTO -> 实体，忽略 DTO 的只读字段，嵌套集合（如活动图片）逐个转换
- to_dto：实体 -> DTO，直接利用 from_attributes 读取 ORM 属性
"""

from typing import Any, Dict, Optional, Type

from ..schemas.base import EntityDTO


class EntityMapper:
    def __init__(
        self,
        entity_class: Type[Any],
        dto_class: Type[EntityDTO],
        nested: Optional[Dict[str, "EntityMapper"]] = None,
    ):
        self.entity_class = entity_class
        self.dto_class = dto_class
        self.nested = nested or {}

    def to_entity(self, dto: EntityDTO) -> Any:
        exclude = set(dto.read_only_fields) | set(self.nested)
        entity = self.entity_class(**dto.model_dump(exclude=exclude))
        for attr, child_mapper in self.nested.items():
            children = getattr(dto, attr) or []
            setattr(entity, attr, [child_mapper.to_entity(child) for child in children])
        return entity

    def to_dto(self, entity: Any) -> EntityDTO:
        return self.dto_class.model_validate(entity)

    def to_document(self, dto: EntityDTO) -> Dict[str, Any]:
        """搜索索引中存放的文档：与接口返回的 JSON 相同。"""
        return dto.model_dump(mode="json", by_alias=True)

    def from_document(self, document: Dict[str, Any]) -> EntityDTO:
        return self.dto_class.model_validate(document)
