"""
框架选择器

在进程启动时决定 MCP 服务使用哪一个 UI 框架的实现（React、Vue 或 Svelte）。

选择顺序（固定）：
1. 命令行参数 ``--framework <name>`` 或 ``-f <name>``
2. 环境变量 ``FRAMEWORK``
3. 默认框架 ``react``

取值不区分大小写；无效的命令行取值会记录警告并继续向下回退。
每次调用都重新解析输入，不缓存结果。
"""

import importlib
import os
import sys
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from ..shared.logging import get_logger

_logger = get_logger(__name__)


class Framework(str, Enum):
    """支持的 UI 框架"""
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"

    @classmethod
    def parse(cls, value: str | None) -> "Framework | None":
        """不区分大小写地解析框架名称，无效时返回 None"""
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


DEFAULT_FRAMEWORK = Framework.REACT
FRAMEWORK_ENV_VAR = "FRAMEWORK"
FRAMEWORK_FLAGS = ("--framework", "-f")


class FrameworkLogger(Protocol):
    """框架选择器需要的日志接口"""

    def info(self, message: str) -> Any: ...

    def warning(self, message: str) -> Any: ...


class SilentLogger:
    """丢弃所有消息的日志记录器"""

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass


@dataclass(frozen=True)
class FrameworkInfo:
    """框架元数据"""
    current: Framework
    repository: str
    file_extension: str
    description: str

    def to_dict(self) -> dict[str, str]:
        """转换为字典"""
        return {
            "current": self.current.value,
            "repository": self.repository,
            "file_extension": self.file_extension,
            "description": self.description,
        }


_FRAMEWORK_TABLE: dict[Framework, tuple[str, str, str]] = {
    Framework.REACT: ("shadcn-ui/ui", ".tsx", "React components from shadcn/ui v4"),
    Framework.VUE: ("unovue/shadcn-vue", ".vue", "Vue components from shadcn-vue v4"),
    Framework.SVELTE: ("huntabyte/shadcn-svelte", ".svelte", "Svelte components from shadcn-svelte"),
}


Loader = Callable[[], Awaitable[Any]]


def _module_loader(module_path: str, export: str = "transport") -> Loader:
    """创建按模块路径导入并读取指定导出的加载函数"""
    async def load() -> Any:
        module = importlib.import_module(module_path)
        return getattr(module, export)

    return load


IMPLEMENTATION_LOADERS: dict[Framework, Loader] = {
    Framework.REACT: _module_loader("src.framework.transports.react"),
    Framework.VUE: _module_loader("src.framework.transports.vue"),
    Framework.SVELTE: _module_loader("src.framework.transports.svelte"),
}


def _find_flag_value(args: Sequence[str]) -> str | None:
    """返回第一个框架参数后面的取值"""
    for index, arg in enumerate(args):
        if arg in FRAMEWORK_FLAGS:
            if index + 1 < len(args) and args[index + 1]:
                return args[index + 1]
            return None
    return None


def resolve_framework(
    args: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    logger: FrameworkLogger | None = None,
) -> Framework:
    """
    解析当前使用的框架

    Args:
        args: 命令行参数（不含程序名），默认 ``sys.argv[1:]``
        env: 环境变量映射，默认 ``os.environ``
        logger: 日志记录器，默认使用模块日志

    Returns:
        Framework: 选中的框架，始终是三个有效值之一
    """
    args = sys.argv[1:] if args is None else args
    env = os.environ if env is None else env
    logger = _logger if logger is None else logger

    requested = _find_flag_value(args)
    if requested is not None:
        value = requested.lower()
        framework = Framework.parse(value)
        if framework is not None:
            logger.info(f"Framework set to '{framework.value}' via command line argument")
            return framework
        logger.warning(
            f"Invalid framework '{value}' specified. Using default '{DEFAULT_FRAMEWORK.value}'"
        )

    framework = Framework.parse(env.get(FRAMEWORK_ENV_VAR))
    if framework is not None:
        logger.info(f"Framework set to '{framework.value}' via environment variable")
        return framework

    logger.info(f"Using default framework: '{DEFAULT_FRAMEWORK.value}'")
    return DEFAULT_FRAMEWORK


async def load_implementation(
    args: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    logger: FrameworkLogger | None = None,
    loaders: Mapping[Framework, Loader] | None = None,
) -> Any:
    """
    加载选中框架的请求传输对象

    只加载一个实现模块；导入失败直接向调用方抛出，不重试也不回退。
    """
    framework = resolve_framework(args, env, logger)
    loader = (IMPLEMENTATION_LOADERS if loaders is None else loaders)[framework]
    return await loader()


def framework_info(framework: Framework) -> FrameworkInfo:
    """查询指定框架的元数据"""
    repository, file_extension, description = _FRAMEWORK_TABLE[framework]
    return FrameworkInfo(
        current=framework,
        repository=repository,
        file_extension=file_extension,
        description=description,
    )


def describe_framework(
    args: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    logger: FrameworkLogger | None = None,
) -> FrameworkInfo:
    """获取当前框架的元数据（用于帮助文本和日志）"""
    return framework_info(resolve_framework(args, env, logger))


def report_framework_selection(
    args: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    logger: FrameworkLogger | None = None,
) -> None:
    """输出框架选择结果以及切换到其他框架的提示"""
    logger = _logger if logger is None else logger
    info = describe_framework(args, env, logger)

    logger.info(f"MCP Server configured for {info.current.value.upper()} framework")
    logger.info(f"Repository: {info.repository}")
    logger.info(f"File extension: {info.file_extension}")
    logger.info(f"Description: {info.description}")

    for other in Framework:
        if other is info.current:
            continue
        logger.info(
            f"To switch to {other.value.capitalize()}: "
            f"set {FRAMEWORK_ENV_VAR}={other.value} or use --framework {other.value}"
        )
