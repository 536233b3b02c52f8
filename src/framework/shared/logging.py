"""
结构化日志配置模块

基于 structlog，为 shadcn MCP 服务提供统一的日志解决方案。

主要特性:
- 结构化日志输出（JSON/控制台）
- 输出到 stderr，stdout 保留给 MCP stdio 通道
- 敏感数据过滤（GitHub 令牌等）

使用方法:
    from src.framework.shared.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Framework set to 'vue' via environment variable")

环境变量:
    LOG_LEVEL: 日志级别 (DEBUG, INFO, WARNING, ERROR)
    LOG_FORMAT: 日志格式 (json, console)
"""

import logging
import os
import sys

import structlog
from structlog.types import EventDict, Processor


class ShadcnLoggingConfig:
    """日志配置类

    只读取日志相关的环境变量，其他配置项无效时日志仍可初始化。
    """

    def __init__(self) -> None:
        self.log_level = self._get_log_level()
        self.log_format = self._get_log_format()

    def _get_log_level(self) -> int:
        """获取日志级别"""
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        return getattr(logging, level, logging.INFO)

    def _get_log_format(self) -> str:
        """获取日志格式"""
        return os.getenv("LOG_FORMAT", "console").lower()


class SensitiveDataFilter:
    """敏感数据过滤器"""

    SENSITIVE_KEYS = {
        'password', 'secret', 'token', 'api_key', 'access_token',
        'auth_token', 'authorization', 'github_personal_access_token'
    }

    def __call__(
        self, logger: logging.Logger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        """过滤敏感数据"""
        for key, value in event_dict.items():
            if key.lower() in self.SENSITIVE_KEYS and isinstance(value, str) and value:
                # 保留前4位，其余用*替换
                if len(value) > 8:
                    event_dict[key] = value[:4] + "*" * (len(value) - 4)
                else:
                    event_dict[key] = "*" * len(value)

        return event_dict


def _get_shared_processors() -> list[Processor]:
    """获取共享处理器链"""
    return [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        SensitiveDataFilter(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _get_json_processors() -> list[Processor]:
    """获取 JSON 输出处理器链"""
    processors = _get_shared_processors()
    processors.append(structlog.processors.JSONRenderer())
    return processors


def _get_console_processors() -> list[Processor]:
    """获取控制台输出处理器链"""
    processors = _get_shared_processors()
    processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_structlog() -> None:
    """配置 structlog"""
    config = ShadcnLoggingConfig()

    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",  # structlog 会处理格式
        stream=sys.stderr,
    )

    if config.log_format == "json":
        processors = _get_json_processors()
    else:
        processors = _get_console_processors()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
        context_class=dict,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    获取配置好的日志记录器

    Args:
        name: 日志记录器名称，默认为 "shadcn_mcp"

    Returns:
        structlog.stdlib.BoundLogger: 配置好的日志记录器
    """
    return structlog.get_logger(name or "shadcn_mcp")


# 导入时自动配置
configure_structlog()
