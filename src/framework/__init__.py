"""
framework/ - 框架层

提供 MCP 服务共用的基础设施，包括：
- selection/: UI 框架选择（React, Vue, Svelte）
- transports/: 各框架的组件仓库传输
- shared/: 配置、日志和异常
"""

from . import selection, shared, transports

__all__ = ["selection", "transports", "shared"]
