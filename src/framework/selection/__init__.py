"""
selection/ - UI 框架选择

根据命令行参数、环境变量或默认值选择 React/Vue/Svelte 实现，
并提供框架元数据用于日志和帮助文本。
"""

from .framework_selector import (
    DEFAULT_FRAMEWORK,
    FRAMEWORK_ENV_VAR,
    FRAMEWORK_FLAGS,
    IMPLEMENTATION_LOADERS,
    Framework,
    FrameworkInfo,
    FrameworkLogger,
    SilentLogger,
    describe_framework,
    framework_info,
    load_implementation,
    report_framework_selection,
    resolve_framework,
)

__all__ = [
    "Framework",
    "FrameworkInfo",
    "FrameworkLogger",
    "SilentLogger",
    "DEFAULT_FRAMEWORK",
    "FRAMEWORK_ENV_VAR",
    "FRAMEWORK_FLAGS",
    "IMPLEMENTATION_LOADERS",
    "resolve_framework",
    "load_implementation",
    "describe_framework",
    "framework_info",
    "report_framework_selection",
]
