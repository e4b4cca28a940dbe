"""
健身活动与活动图片的 DTO

包含以下模型：
1. PicsDTO: 活动图片
2. FitnessActivityDTO: 健身活动（含图片集合）
"""

import datetime
from typing import List, Optional

from pydantic import Field

from .base import EntityDTO


class PicsDTO(EntityDTO):
    """活动图片"""
    src: str = Field(..., max_length=1024, description="图片地址")
    activity_id: Optional[int] = Field(None, description="所属活动ID")


class FitnessActivityDTO(EntityDTO):
    """健身活动"""
    title: Optional[str] = Field(None, max_length=64, description="活动标题")
    description: Optional[str] = Field(None, max_length=128, description="活动描述")
    wechat_user_id: Optional[str] = Field(None, max_length=128, description="发起人微信用户标识")
    nick_name: Optional[str] = Field(None, max_length=128, description="发起人昵称")
    avatar: Optional[str] = Field(None, max_length=1024, description="发起人头像")
    project: Optional[str] = Field(None, max_length=128, description="发起人所在项目")
    company_role: Optional[str] = Field(None, max_length=255, description="发起人职位")
    sign_start_time: Optional[datetime.datetime] = Field(None, description="报名开始时间")
    sign_end_time: Optional[datetime.datetime] = Field(None, description="报名截止时间")
    activity_start_time: Optional[datetime.datetime] = Field(None, description="活动开始时间")
    activity_end_time: Optional[datetime.datetime] = Field(None, description="活动结束时间")
    attend_count: Optional[int] = Field(None, ge=0, description="参与人数")
    images: List[PicsDTO] = Field(default_factory=list, description="活动图片")
