"""Svelte 组件传输（huntabyte/shadcn-svelte）"""

from .base import GitHubTransport

transport = GitHubTransport(
    repository="huntabyte/shadcn-svelte",
    component_path="docs/src/lib/registry/ui/{name}/{name}.svelte",
)
