"""参与者 DTO"""

import datetime
from typing import Optional

from pydantic import Field

from ..db.models import AttendeeStatus
from .base import EntityDTO


class AttendeeDTO(EntityDTO):
    """活动参与者"""
    activity_id: Optional[int] = Field(None, description="活动ID")
    wechat_user_id: str = Field(..., max_length=128, description="参与者微信用户标识")
    nick_name: Optional[str] = Field(None, max_length=128, description="参与者昵称")
    avatar: Optional[str] = Field(None, max_length=1024, description="参与者头像")
    status: AttendeeStatus = Field(AttendeeStatus.JOINED, description="参与状态")
    join_time: Optional[datetime.datetime] = Field(None, description="报名时间")
