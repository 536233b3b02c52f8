"""
CLI 主入口

基于 Typer 实现：
- 全局 --framework/-f 选项（交给框架选择器解析，无效取值回退而不报错）
- 框架信息查看
- 组件源码获取
- 配置校验
"""

import asyncio
import os
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_traceback

from src import __description__, __version__
from src.framework.selection import (
    Framework,
    SilentLogger,
    describe_framework,
    framework_info,
    load_implementation,
    report_framework_selection,
    resolve_framework,
)
from src.framework.shared.config import get_settings
from src.framework.shared.exceptions import ShadcnMcpError

# 初始化 Rich
console = Console()
err_console = Console(stderr=True)
install_traceback()

app = typer.Typer(
    name="shadcn-mcp",
    help="shadcn/ui 组件 MCP 服务 (React, Vue, Svelte)",
    rich_markup_mode="markdown",
    pretty_exceptions_enable=True
)


def setup_logging(verbose: int = 0) -> None:
    """设置日志配置"""
    logger.remove()

    log_level = "DEBUG" if verbose > 0 else "INFO"

    # stdout 保留给命令输出
    logger.add(
        RichHandler(console=err_console, markup=False, rich_tracebacks=True),
        level=log_level,
        format="{message}"
    )

    # 配置无效时不写文件日志，由 config-check 报告具体问题
    try:
        log_file = get_settings().LOG_FILE
    except ValidationError:
        log_file = None

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            rotation="10 MB",
            retention="1 week",
            backtrace=True,
            diagnose=False
        )


FRAMEWORK_OPTION = typer.Option(
    None, "--framework", "-f", help="UI 框架 (react, vue, svelte)，不区分大小写"
)
VERBOSE_OPTION = typer.Option(0, "--verbose", "-v", count=True, help="增加输出详细程度")
COMPONENT_ARG = typer.Argument(..., help="组件名称，例如 button")


def _framework_args(ctx: typer.Context) -> list[str]:
    return ctx.obj["framework_args"] if ctx.obj else []


@app.callback()
def main_callback(
    ctx: typer.Context,
    framework: str = FRAMEWORK_OPTION,
    verbose: int = VERBOSE_OPTION,
) -> None:
    """主回调函数，处理全局选项"""
    setup_logging(verbose)

    # 取值原样交给选择器，与进程参数 --framework <name> 的语义一致
    ctx.obj = {"framework_args": ["--framework", framework] if framework else []}


@app.command()
def version() -> None:
    """显示版本信息"""
    console.print(f"shadcn-ui-mcp-server v{__version__}", highlight=False)
    console.print(__description__, highlight=False)


@app.command()
def frameworks(ctx: typer.Context) -> None:
    """列出支持的框架，* 标记当前选中的框架"""
    current = resolve_framework(_framework_args(ctx), os.environ, SilentLogger())

    for framework in Framework:
        meta = framework_info(framework)
        marker = "*" if framework is current else " "
        console.print(
            f"{marker} {framework.value:<7} {meta.repository:<24} {meta.file_extension}",
            highlight=False
        )


@app.command()
def info(ctx: typer.Context) -> None:
    """显示当前框架配置以及切换方式"""
    args = _framework_args(ctx)
    report_framework_selection(args, os.environ, logger)

    selected = describe_framework(args, os.environ, SilentLogger())
    console.print(f"框架: {selected.current.value.upper()}", highlight=False)
    console.print(f"仓库: {selected.repository}", highlight=False)
    console.print(f"扩展名: {selected.file_extension}", highlight=False)
    console.print(f"说明: {selected.description}", highlight=False)


async def _fetch_component(args: list[str], component: str) -> str:
    transport = await load_implementation(args, os.environ, logger)
    try:
        return await transport.get_component_source(component)
    finally:
        await transport.aclose()


@app.command()
def fetch(ctx: typer.Context, component: str = COMPONENT_ARG) -> None:
    """从当前框架的仓库获取组件源码"""
    try:
        source = asyncio.run(_fetch_component(_framework_args(ctx), component))
    except ShadcnMcpError as e:
        logger.error(f"获取组件失败: {e.message}")
        console.print(f"[red]❌[/red] {e.message}")
        raise typer.Exit(code=1)

    console.print(source, markup=False, highlight=False)


@app.command("config-check")
def config_check() -> None:
    """校验环境配置"""
    try:
        errors = get_settings().validate_config()
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]

    if errors:
        console.print(f"[red]❌[/red] 发现 {len(errors)} 个配置问题:")
        for error in errors:
            console.print(f"  - {error}", markup=False, highlight=False)
        raise typer.Exit(code=1)

    console.print("✅ 配置验证通过")


if __name__ == "__main__":
    app()
