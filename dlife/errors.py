"""
错误类型与全局异常处理

错误分类：
1. BadRequestAlertError：客户端请求不合法（如新建时携带了ID），返回 400
2. StorageConstraintViolation：数据库唯一/非空约束冲突，返回 409
3. 未找到：路由层直接抛 HTTPException(404)

所有错误响应都带有失败告警头（见 header_util.create_failure_alert），
响应体为统一的问题描述 JSON。
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import header_util

logger = logging.getLogger(__name__)


class BadRequestAlertError(Exception):
    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class StorageConstraintViolation(Exception):
    error_key = "constraintviolation"

    def __init__(self, entity_name: str, message: str):
        super().__init__(f"{entity_name}: {message}")
        self.entity_name = entity_name
        self.message = message


def problem_response(
    status_code: int,
    title: str,
    entity_name: str,
    error_key: str,
    message: Optional[str] = None,
) -> JSONResponse:
    """构造统一的错误响应（问题描述体 + 失败告警头）。"""
    body = {
        "title": title,
        "status": status_code,
        "entityName": entity_name,
        "errorKey": error_key,
        "message": message or f"error.{error_key}",
        "params": entity_name,
    }
    return JSONResponse(
        status_code=status_code,
        content=body,
        headers=header_util.create_failure_alert(entity_name, error_key),
    )


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertError):
    logger.info("[rest][bad-request] entity=%s key=%s msg=%s", exc.entity_name, exc.error_key, exc.message)
    return problem_response(400, exc.message, exc.entity_name, exc.error_key)


async def constraint_violation_handler(request: Request, exc: StorageConstraintViolation):
    logger.warning("[rest][constraint-violation] entity=%s err=%s", exc.entity_name, exc.message)
    return problem_response(409, "Storage constraint violation", exc.entity_name, exc.error_key, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertError, bad_request_alert_handler)
    app.add_exception_handler(StorageConstraintViolation, constraint_violation_handler)
