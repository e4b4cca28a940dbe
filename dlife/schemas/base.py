"""
DTO 基类

所有实体的传输对象（DTO）共享以下约定：
1. JSON 字段名使用驼峰（openId、nickName），请求中也接受下划线写法；
2. 可以直接从 ORM 对象构造（from_attributes）；
3. 相等性只由 id 决定：两个 DTO 类型相同且 id 都非空、相等时才相等，
   id 未设置的 DTO 之间永远不相等，哈希值只取 id。
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntityDTO(BaseModel):
    """实体 DTO 基类"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: Optional[int] = None

    # 只读字段：由服务端维护，DTO -> 实体转换时忽略
    read_only_fields: ClassVar[FrozenSet[str]] = frozenset()

    def __eq__(self, other):
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)
