"""
微信用户 DTO

open_id 必填且全局唯一（唯一性由数据库约束保证，重复时返回 409）。
"""

import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .base import EntityDTO


class WechatUserDTO(EntityDTO):
    """微信用户档案"""
    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"create_time", "update_time"})

    open_id: str = Field(..., min_length=1, max_length=128, description="微信 OpenID")
    nick_name: Optional[str] = Field(None, max_length=128, description="昵称")
    avatar: Optional[str] = Field(None, max_length=1024, description="头像URL")
    mobile: Optional[str] = Field(None, max_length=32, description="手机号")
    project: Optional[str] = Field(None, max_length=128, description="所在项目")
    seat: Optional[str] = Field(None, max_length=64, description="工位")
    bio: Optional[str] = Field(None, max_length=512, description="个人简介")
    skill: Optional[str] = Field(None, max_length=255, description="技能")
    sex: Optional[int] = Field(None, description="性别：0 未知，1 男，2 女")
    company_role: Optional[str] = Field(None, max_length=255, description="职位")
    is_admin: bool = Field(False, description="是否管理员")
    is_banned: bool = Field(False, description="是否被禁用")
    create_time: Optional[datetime.datetime] = None
    update_time: Optional[datetime.datetime] = None
