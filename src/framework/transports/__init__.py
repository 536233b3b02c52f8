"""
transports/ - 框架相关的组件仓库传输

react/vue/svelte 模块各自导出一个 ``transport``，由框架选择器按名称加载。
这里不导入具体模块，保证每次只加载被选中的那一个。
"""

from .base import GitHubTransport

__all__ = ["GitHubTransport"]
