"""
框架选择器单元测试

测试框架选择的各个方面，包括：
- 命令行参数解析（长/短参数，大小写）
- 环境变量回退
- 默认框架
- 优先级
- 框架元数据
- 实现模块加载
"""

import sys

import pytest

from src.framework.selection import (
    DEFAULT_FRAMEWORK,
    IMPLEMENTATION_LOADERS,
    Framework,
    FrameworkInfo,
    SilentLogger,
    describe_framework,
    framework_info,
    load_implementation,
    report_framework_selection,
    resolve_framework,
)
from src.framework.transports import GitHubTransport


class RecordingLogger:
    """记录日志消息的测试日志器"""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def messages(self, level: str) -> list[str]:
        return [message for record_level, message in self.records if record_level == level]


@pytest.fixture
def recorder():
    """创建记录日志器"""
    return RecordingLogger()


EXPECTED_INFO = {
    Framework.REACT: ("shadcn-ui/ui", ".tsx", "React components from shadcn/ui v4"),
    Framework.VUE: ("unovue/shadcn-vue", ".vue", "Vue components from shadcn-vue v4"),
    Framework.SVELTE: ("huntabyte/shadcn-svelte", ".svelte", "Svelte components from shadcn-svelte"),
}


class TestResolveFramework:
    """框架解析测试"""

    @pytest.mark.parametrize("flag", ["--framework", "-f"])
    @pytest.mark.parametrize("value,expected", [
        ("react", Framework.REACT),
        ("Vue", Framework.VUE),
        ("SVELTE", Framework.SVELTE),
    ])
    def test_command_line_flag(self, recorder, flag, value, expected):
        """测试命令行参数选择框架"""
        result = resolve_framework([flag, value], {}, recorder)

        assert result is expected
        assert recorder.records == [
            ("info", f"Framework set to '{expected.value}' via command line argument")
        ]

    def test_invalid_command_line_value_falls_back_to_default(self, recorder):
        """测试无效命令行取值回退到默认框架"""
        result = resolve_framework(["--framework", "angular"], {}, recorder)

        assert result is DEFAULT_FRAMEWORK
        assert recorder.messages("warning") == [
            "Invalid framework 'angular' specified. Using default 'react'"
        ]
        assert recorder.messages("info") == ["Using default framework: 'react'"]

    def test_invalid_command_line_value_falls_back_to_environment(self, recorder):
        """测试无效命令行取值时仍然读取环境变量"""
        result = resolve_framework(["-f", "Angular"], {"FRAMEWORK": "svelte"}, recorder)

        assert result is Framework.SVELTE
        assert recorder.records == [
            ("warning", "Invalid framework 'angular' specified. Using default 'react'"),
            ("info", "Framework set to 'svelte' via environment variable"),
        ]

    @pytest.mark.parametrize("value,expected", [
        ("react", Framework.REACT),
        ("VUE", Framework.VUE),
        ("Svelte", Framework.SVELTE),
    ])
    def test_environment_variable(self, recorder, value, expected):
        """测试环境变量选择框架"""
        result = resolve_framework([], {"FRAMEWORK": value}, recorder)

        assert result is expected
        assert recorder.records == [
            ("info", f"Framework set to '{expected.value}' via environment variable")
        ]

    def test_invalid_environment_variable_is_ignored(self, recorder):
        """测试无效环境变量被忽略且不产生警告"""
        result = resolve_framework([], {"FRAMEWORK": "solid"}, recorder)

        assert result is DEFAULT_FRAMEWORK
        assert recorder.messages("warning") == []
        assert recorder.messages("info") == ["Using default framework: 'react'"]

    def test_environment_variable_name_is_case_sensitive(self, recorder):
        """测试环境变量名区分大小写"""
        result = resolve_framework([], {"framework": "vue"}, recorder)

        assert result is DEFAULT_FRAMEWORK

    def test_default_when_nothing_set(self, recorder):
        """测试未设置任何来源时使用默认框架"""
        result = resolve_framework([], {}, recorder)

        assert result is Framework.REACT
        assert recorder.records == [("info", "Using default framework: 'react'")]

    def test_command_line_wins_over_environment(self, recorder):
        """测试命令行优先于环境变量"""
        result = resolve_framework(["--framework", "vue"], {"FRAMEWORK": "svelte"}, recorder)

        assert result is Framework.VUE
        assert len(recorder.records) == 1

    def test_flag_without_value_is_ignored(self, recorder):
        """测试缺少取值的参数被忽略"""
        result = resolve_framework(["serve", "--framework"], {"FRAMEWORK": "vue"}, recorder)

        assert result is Framework.VUE
        assert recorder.messages("warning") == []

    def test_flag_name_is_case_sensitive(self, recorder):
        """测试参数名区分大小写"""
        result = resolve_framework(["--Framework", "vue"], {}, recorder)

        assert result is DEFAULT_FRAMEWORK

    def test_first_flag_occurrence_is_used(self, recorder):
        """测试只使用第一次出现的参数"""
        result = resolve_framework(["-f", "svelte", "--framework", "vue"], {}, recorder)

        assert result is Framework.SVELTE

    def test_each_call_rereads_inputs(self):
        """测试每次调用都重新解析输入"""
        env = {"FRAMEWORK": "vue"}
        assert resolve_framework([], env, SilentLogger()) is Framework.VUE

        env["FRAMEWORK"] = "svelte"
        assert resolve_framework([], env, SilentLogger()) is Framework.SVELTE

    def test_defaults_to_process_state(self, monkeypatch, recorder):
        """测试未传入参数时读取进程参数和环境变量"""
        monkeypatch.setattr(sys, "argv", ["shadcn-mcp", "-f", "svelte"])
        monkeypatch.setenv("FRAMEWORK", "vue")

        assert resolve_framework(logger=recorder) is Framework.SVELTE

        monkeypatch.setattr(sys, "argv", ["shadcn-mcp"])
        assert resolve_framework(logger=recorder) is Framework.VUE


class TestDescribeFramework:
    """框架元数据测试"""

    @pytest.mark.parametrize("framework", list(Framework))
    def test_metadata_table(self, framework):
        """测试每个框架的元数据与固定表一致"""
        info = describe_framework(["--framework", framework.value], {}, SilentLogger())

        assert info == FrameworkInfo(framework, *EXPECTED_INFO[framework])

    def test_framework_info_to_dict(self):
        """测试元数据转换为字典"""
        assert framework_info(Framework.VUE).to_dict() == {
            "current": "vue",
            "repository": "unovue/shadcn-vue",
            "file_extension": ".vue",
            "description": "Vue components from shadcn-vue v4",
        }

    def test_framework_info_is_read_only(self):
        """测试元数据不可修改"""
        info = framework_info(Framework.REACT)

        with pytest.raises(AttributeError):
            info.repository = "other/repo"


class TestReportFrameworkSelection:
    """框架选择报告测试"""

    def test_report_lines(self, recorder):
        """测试报告输出的日志行"""
        report_framework_selection(["-f", "svelte"], {}, recorder)

        assert recorder.messages("info") == [
            "Framework set to 'svelte' via command line argument",
            "MCP Server configured for SVELTE framework",
            "Repository: huntabyte/shadcn-svelte",
            "File extension: .svelte",
            "Description: Svelte components from shadcn-svelte",
            "To switch to React: set FRAMEWORK=react or use --framework react",
            "To switch to Vue: set FRAMEWORK=vue or use --framework vue",
        ]

    def test_report_hints_exclude_current_framework(self, recorder):
        """测试切换提示不包含当前框架"""
        report_framework_selection([], {}, recorder)

        hints = [m for m in recorder.messages("info") if m.startswith("To switch to")]
        assert len(hints) == 2
        assert not any("React" in hint for hint in hints)

    def test_report_returns_none(self):
        """测试报告没有返回值"""
        assert report_framework_selection([], {}, SilentLogger()) is None


class TestLoadImplementation:
    """实现模块加载测试"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("framework", list(Framework))
    async def test_loads_transport_for_each_framework(self, framework):
        """测试为每个框架加载对应的传输对象"""
        transport = await load_implementation(
            ["--framework", framework.value], {}, SilentLogger()
        )

        assert isinstance(transport, GitHubTransport)
        assert transport.repository == framework_info(framework).repository

    @pytest.mark.asyncio
    async def test_transports_are_distinct(self):
        """测试不同框架加载不同的对象"""
        loaded = [
            await load_implementation(["-f", framework.value], {}, SilentLogger())
            for framework in Framework
        ]

        assert len({id(transport) for transport in loaded}) == 3

    @pytest.mark.asyncio
    async def test_exactly_one_loader_is_called(self):
        """测试每次只调用一个加载函数"""
        calls = []

        def make_loader(framework):
            async def load():
                calls.append(framework)
                return framework.value
            return load

        loaders = {framework: make_loader(framework) for framework in Framework}
        result = await load_implementation([], {"FRAMEWORK": "vue"}, SilentLogger(), loaders)

        assert result == "vue"
        assert calls == [Framework.VUE]

    @pytest.mark.asyncio
    async def test_missing_module_propagates(self, monkeypatch):
        """测试实现模块缺失时错误直接抛出"""
        monkeypatch.setitem(sys.modules, "src.framework.transports.svelte", None)

        with pytest.raises(ImportError):
            await load_implementation(["-f", "svelte"], {}, SilentLogger())

    @pytest.mark.asyncio
    async def test_missing_module_does_not_fall_back(self, monkeypatch):
        """测试加载失败时不会替换为其他框架"""
        monkeypatch.setitem(sys.modules, "src.framework.transports.react", None)

        with pytest.raises(ImportError):
            await load_implementation([], {}, SilentLogger())

    def test_loader_table_covers_every_framework(self):
        """测试加载表覆盖所有框架"""
        assert set(IMPLEMENTATION_LOADERS) == set(Framework)
