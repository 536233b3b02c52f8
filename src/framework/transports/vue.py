"""Vue 组件传输（unovue/shadcn-vue）"""

from .base import GitHubTransport

# shadcn-vue 每个组件是一个目录，主文件使用 PascalCase 命名
transport = GitHubTransport(
    repository="unovue/shadcn-vue",
    component_path="apps/v4/registry/new-york-v4/ui/{name}/{pascal}.vue",
    branch="dev",
)
