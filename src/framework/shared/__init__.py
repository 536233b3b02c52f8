"""
shared/ - 共享工具

提供跨层共享的组件：
- 配置管理 (pydantic-settings)
- 结构化日志 (structlog)
- 异常定义
"""

from .config import Settings, get_settings
from .exceptions import (
    ComponentNotFoundError,
    ShadcnMcpError,
    TransportError,
)

__all__ = [
    "Settings", "get_settings",
    "ShadcnMcpError",
    "TransportError", "ComponentNotFoundError"
]
