"""
本文件定义了项目的数据模型（ORM类），用于数据库表结构的声明。

1. FitnessActivity：健身活动，对应 fitness_activity 表。包含发起人信息、报名时间窗、活动时间窗，
   并拥有一组活动图片（Pics），图片随活动一起创建、替换和删除。
2. Pics：活动图片，对应 pics 表，只属于一个活动。
3. Attendee：活动参与者，对应 attendee 表，记录谁报名了哪个活动以及参与状态。
4. Rates：评分，对应 rates 表，记录用户对活动的打分与评论。
5. WechatUser：微信用户档案，对应 wechat_user 表，open_id 唯一且必填。

唯一性与非空约束全部由表结构保证，应用层不做重复校验。
"""

import datetime
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..db_base import Base


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class AttendeeStatus(str, enum.Enum):
    """参与状态"""
    JOINED = "JOINED"
    QUIT = "QUIT"
    CHECKED_IN = "CHECKED_IN"


class FitnessActivity(Base):
    """
    健身活动表模型
    - wechat_user_id / nick_name / avatar / project / company_role: 发起人信息快照
    - sign_start_time / sign_end_time: 报名时间窗
    - activity_start_time / activity_end_time: 活动时间窗
    - images: 活动图片（级联保存，删除孤儿）
    """
    __tablename__ = 'fitness_activity'
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(64), nullable=True)
    description = Column(String(128), nullable=True)
    wechat_user_id = Column(String(128), nullable=True)
    nick_name = Column(String(128), nullable=True)
    avatar = Column(String(1024), nullable=True)
    project = Column(String(128), nullable=True)
    company_role = Column(String(255), nullable=True)
    sign_start_time = Column(DateTime, nullable=True)
    sign_end_time = Column(DateTime, nullable=True)
    activity_start_time = Column(DateTime, nullable=True)
    activity_end_time = Column(DateTime, nullable=True)
    attend_count = Column(Integer, nullable=True)
    images = relationship(
        'Pics',
        back_populates='activity',
        cascade='all, delete-orphan',
        order_by='Pics.id',
    )


class Pics(Base):
    """活动图片表模型"""
    __tablename__ = 'pics'
    id = Column(Integer, primary_key=True, index=True)
    src = Column(String(1024), nullable=False)
    activity_id = Column(Integer, ForeignKey('fitness_activity.id'), nullable=True)
    activity = relationship('FitnessActivity', back_populates='images')


class Attendee(Base):
    """
    参与者表模型
    - activity_id: 外键，关联到 FitnessActivity（不做级联，删除仍有参与者的活动由外键约束拒绝）
    - wechat_user_id: 参与者的微信用户标识（必填）
    - status: 参与状态（JOINED / QUIT / CHECKED_IN）
    """
    __tablename__ = 'attendee'
    id = Column(Integer, primary_key=True, index=True)
    activity_id = Column(Integer, ForeignKey('fitness_activity.id'), nullable=True)
    wechat_user_id = Column(String(128), nullable=False)
    nick_name = Column(String(128), nullable=True)
    avatar = Column(String(1024), nullable=True)
    status = Column(
        Enum(AttendeeStatus, native_enum=False, length=16),
        nullable=False,
        default=AttendeeStatus.JOINED,
    )
    join_time = Column(DateTime, nullable=True)


class Rates(Base):
    """评分表模型（create_time / update_time 由服务端维护）"""
    __tablename__ = 'rates'
    id = Column(Integer, primary_key=True, index=True)
    activity_id = Column(Integer, nullable=True)
    wechat_user_id = Column(String(128), nullable=True)
    nick_name = Column(String(128), nullable=True)
    rate = Column(Integer, nullable=False)
    comments = Column(String(512), nullable=True)
    create_time = Column(DateTime, default=_utcnow)
    update_time = Column(DateTime, default=_utcnow, onupdate=_utcnow)


class WechatUser(Base):
    """微信用户表模型"""
    __tablename__ = 'wechat_user'
    id = Column(Integer, primary_key=True, index=True)
    open_id = Column(String(128), nullable=False, unique=True)
    nick_name = Column(String(128), nullable=True)
    avatar = Column(String(1024), nullable=True)
    mobile = Column(String(32), nullable=True)
    project = Column(String(128), nullable=True)
    seat = Column(String(64), nullable=True)
    bio = Column(String(512), nullable=True)
    skill = Column(String(255), nullable=True)
    sex = Column(Integer, nullable=True)
    company_role = Column(String(255), nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False)
    is_banned = Column(Boolean, nullable=False, default=False)
    create_time = Column(DateTime, default=_utcnow)
    update_time = Column(DateTime, default=_utcnow, onupdate=_utcnow)
