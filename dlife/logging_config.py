"""
日志初始化

- 根日志格式：时间 等级 应用名 [模块] 消息，应用名取自 APP_NAME，便于多个服务共用日志收集；
- 等级优先取调用方传入值，其次是 config.LOG_LEVEL；无法识别的等级名回退到 INFO 并告警；
- SQLAlchemy 的 SQL 回显与 urllib3（搜索客户端底层）的连接日志只在 DEBUG 下放开。
"""

from typing import Dict, Optional, Union
import logging

from .config import APP_NAME, LOG_LEVEL

LOG_FORMAT = '%(asctime)s %(levelname)s {app} [%(name)s] %(message)s'

# 非 DEBUG 时这些 logger 的最低等级
QUIET_LOGGERS: Dict[str, int] = {
    'sqlalchemy.engine': logging.WARNING,
    'urllib3': logging.WARNING,
}

logger = logging.getLogger(__name__)


def resolve_level(level: Union[str, int, None]) -> Optional[int]:
    """把 'debug' / 'INFO' / 10 之类的取值转换为 logging 等级；无法识别时返回 None"""
    if level is None or level == '':
        return None
    if isinstance(level, int):
        return level
    if level.strip().isdigit():
        return int(level)
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else None


def setup_logging(level: Union[str, int, None] = None) -> int:
    """
    初始化全局日志配置，返回最终生效的等级。

    参数：
        level: 可选的日志等级；为空时使用 config.LOG_LEVEL。
    """
    requested = level if level not in (None, '') else LOG_LEVEL
    resolved = resolve_level(requested)
    logging.basicConfig(
        level=resolved if resolved is not None else logging.INFO,
        format=LOG_FORMAT.format(app=APP_NAME),
    )
    if resolved is None:
        logger.warning("[logging] unknown LOG_LEVEL=%r, falling back to INFO", requested)
        resolved = logging.INFO

    for name, quiet_level in QUIET_LOGGERS.items():
        if resolved > logging.DEBUG:
            logging.getLogger(name).setLevel(quiet_level)
        else:
            logging.getLogger(name).setLevel(logging.NOTSET)
    return resolved
