"""
tests/ - 测试目录

包含测试套件：
- unit/: 单元测试
- cli_snapshots/: CLI 命令测试

测试工具：
- pytest 框架
- pytest-asyncio 异步测试
- httpx.MockTransport 模拟 GitHub
"""
