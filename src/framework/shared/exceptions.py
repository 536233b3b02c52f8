"""
共享异常定义

定义项目中使用的自定义异常。
框架选择本身不抛出异常；这里的异常用于组件源码获取。
"""

from typing import Any


class ShadcnMcpError(Exception):
    """shadcn MCP 服务基础异常"""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None
    ):
        self.message = message
        self.error_code = error_code or "SHADCN_MCP_ERROR"
        self.details = details or {}
        self.cause = cause

        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典格式"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None
        }


class TransportError(ShadcnMcpError):
    """组件仓库请求错误"""
    def __init__(
        self,
        message: str,
        repository: str | None = None,
        status_code: int | None = None,
        branch: str | None = None,
        path: str | None = None,
        cause: Exception | None = None
    ):
        details = {
            key: value
            for key, value in (
                ("repository", repository),
                ("branch", branch),
                ("path", path),
                ("status_code", status_code),
            )
            if value is not None
        }
        super().__init__(message, "TRANSPORT_ERROR", details, cause)


class ComponentNotFoundError(TransportError):
    """组件不存在"""
    def __init__(self, component: str, repository: str, path: str, branch: str | None = None):
        super().__init__(
            f"Component '{component}' not found in {repository}",
            repository=repository,
            status_code=404,
            branch=branch,
            path=path
        )
        self.error_code = "COMPONENT_NOT_FOUND"
        self.details["component"] = component
