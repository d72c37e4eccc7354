from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeqOpsSettings(BaseSettings):
    """全局设置（可由环境变量/.env 覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="SEQ_OPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    verbose: bool = Field(default=False, description="详细日志输出")
    warn_deprecated: bool = Field(
        default=True, description="调用已废弃的别名时发出 DeprecationWarning"
    )


@lru_cache(maxsize=1)
def get_settings() -> SeqOpsSettings:
    return SeqOpsSettings()


__all__ = ["SeqOpsSettings", "get_settings"]
