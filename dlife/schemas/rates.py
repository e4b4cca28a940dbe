"""评分 DTO"""

import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .base import EntityDTO


class RatesDTO(EntityDTO):
    """活动评分（create_time / update_time 只读）"""
    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"create_time", "update_time"})

    activity_id: Optional[int] = Field(None, description="被评分的活动ID")
    wechat_user_id: Optional[str] = Field(None, max_length=128, description="评分人微信用户标识")
    nick_name: Optional[str] = Field(None, max_length=128, description="评分人昵称")
    rate: int = Field(..., ge=1, le=5, description="评分（1-5）")
    comments: Optional[str] = Field(None, max_length=512, description="评论")
    create_time: Optional[datetime.datetime] = None
    update_time: Optional[datetime.datetime] = None
