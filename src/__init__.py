"""
shadcn-ui-mcp-server - shadcn/ui 组件 MCP 服务

为 AI 助手提供 shadcn/ui 组件源码，支持 React、Vue 和 Svelte 三种框架实现。

架构分层：
- framework/: 框架层 - 框架选择、组件仓库传输、共享基础设施
- cli/: 工具层 - Typer 命令行工具
"""

__version__ = "0.1.0"
__description__ = "shadcn/ui 组件 MCP 服务"

from . import framework

__all__ = ["framework"]
