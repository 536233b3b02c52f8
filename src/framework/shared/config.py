"""
配置管理

基于 pydantic-settings 实现：
- 环境变量支持
- .env 文件支持
- 配置验证
- 默认值管理

注意：FRAMEWORK 环境变量不在这里管理，框架选择器直接读取传入的环境映射。
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("console", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """应用配置类"""

    # 日志配置
    LOG_LEVEL: str = Field(default="INFO", description="日志级别")
    LOG_FORMAT: str = Field(default="console", description="日志格式 (console, json)")
    LOG_FILE: str | None = Field(default=None, description="CLI 日志文件路径（可选）")

    # GitHub 配置
    GITHUB_PERSONAL_ACCESS_TOKEN: str = Field(default="", description="GitHub 访问令牌")
    GITHUB_RAW_BASE_URL: str = Field(
        default="https://raw.githubusercontent.com", description="GitHub 原始文件地址"
    )
    GITHUB_API_TIMEOUT: float = Field(default=30.0, description="GitHub 请求超时时间(秒)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def get_github_headers(self) -> dict[str, str]:
        """获取 GitHub 请求头"""
        headers = {"User-Agent": "shadcn-ui-mcp-server"}
        if self.GITHUB_PERSONAL_ACCESS_TOKEN:
            headers["Authorization"] = f"Bearer {self.GITHUB_PERSONAL_ACCESS_TOKEN}"
        return headers

    def validate_config(self) -> list[str]:
        """验证配置项"""
        errors = []

        if self.LOG_LEVEL.upper() not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL 必须是 {', '.join(LOG_LEVELS)} 之一")

        if self.LOG_FORMAT.lower() not in LOG_FORMATS:
            errors.append(f"LOG_FORMAT 必须是 {', '.join(LOG_FORMATS)} 之一")

        if not self.GITHUB_RAW_BASE_URL.startswith(("http://", "https://")):
            errors.append("GITHUB_RAW_BASE_URL 必须是 http(s) 地址")

        if self.GITHUB_API_TIMEOUT <= 0:
            errors.append("GITHUB_API_TIMEOUT 必须大于 0")

        return errors

    def is_valid(self) -> bool:
        """检查配置是否有效"""
        return len(self.validate_config()) == 0


# 全局配置实例 - 延迟初始化
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取全局设置实例"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """丢弃缓存的设置实例，下次访问时重新读取环境"""
    global _settings
    _settings = None
