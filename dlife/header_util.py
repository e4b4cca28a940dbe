"""
响应告警头（Alert headers）工具

前端通过以下响应头展示操作结果：
- 成功：X-<APP_NAME>-alert = <APP_NAME>.<entity>.created|updated|deleted，X-<APP_NAME>-params = 实体ID
- 失败：X-<APP_NAME>-error = error.<errorKey>，X-<APP_NAME>-params = 实体名
"""

from typing import Dict

from . import config


def create_alert(message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{config.APP_NAME}-alert": message,
        f"X-{config.APP_NAME}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{config.APP_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{config.APP_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{config.APP_NAME}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{config.APP_NAME}-error": f"error.{error_key}",
        f"X-{config.APP_NAME}-params": entity_name,
    }
