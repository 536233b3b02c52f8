"""
组件仓库传输层

每个 UI 框架对应一个 GitHubTransport 实例，负责从该框架的 shadcn
仓库读取组件源码。
"""

import httpx

from ..shared.config import get_settings
from ..shared.exceptions import ComponentNotFoundError, TransportError
from ..shared.logging import get_logger

logger = get_logger(__name__)


class GitHubTransport:
    """基于 httpx 的 GitHub 原始文件传输"""

    def __init__(
        self,
        repository: str,
        component_path: str,
        branch: str = "main",
        client: httpx.AsyncClient | None = None,
    ):
        self.repository = repository
        self.branch = branch
        self._component_path = component_path
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """延迟创建 HTTP 客户端"""
        if self._client is None:
            settings = get_settings()
            self._client = httpx.AsyncClient(
                base_url=settings.GITHUB_RAW_BASE_URL,
                headers=settings.get_github_headers(),
                timeout=httpx.Timeout(settings.GITHUB_API_TIMEOUT),
            )
        return self._client

    def component_path(self, name: str) -> str:
        """组件在仓库中的相对路径（模板支持 {name} 和 {pascal}）"""
        slug = name.strip().lower()
        pascal = "".join(part.capitalize() for part in slug.split("-"))
        return self._component_path.format(name=slug, pascal=pascal)

    async def get_component_source(self, name: str) -> str:
        """获取组件源码"""
        path = self.component_path(name)
        url = f"/{self.repository}/{self.branch}/{path}"
        logger.debug("Fetching component source", repository=self.repository, path=path)

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise ComponentNotFoundError(name, self.repository, path, self.branch) from e
            raise TransportError(
                f"GitHub request failed for {path}",
                repository=self.repository,
                branch=self.branch,
                path=path,
                status_code=e.response.status_code,
                cause=e
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"GitHub request failed for {path}: {e}",
                repository=self.repository,
                branch=self.branch,
                path=path,
                cause=e
            ) from e

        return response.text

    async def aclose(self) -> None:
        """关闭 HTTP 客户端"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def __repr__(self) -> str:
        return f"GitHubTransport(repository={self.repository!r}, branch={self.branch!r})"
