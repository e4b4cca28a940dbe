"""
WechatUser API routes

包含：
- POST/PUT/GET /api/wechat-users
- GET/DELETE /api/wechat-users/{id}
- GET /api/_search/wechat-users?query=...

open_id 重复时返回 409（errorKey=constraintviolation）。
"""

from ..schemas.wechat_user import WechatUserDTO
from ..services.entity_services import wechat_user_service
from .resource import build_resource_router

router = build_resource_router("wechat-users", wechat_user_service, WechatUserDTO, label="微信用户", tag="微信用户")
