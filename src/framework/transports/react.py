"""React 组件传输（shadcn-ui/ui）"""

from .base import GitHubTransport

transport = GitHubTransport(
    repository="shadcn-ui/ui",
    component_path="apps/v4/registry/new-york-v4/ui/{name}.tsx",
)
