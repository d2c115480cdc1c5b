from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="CLUSTERNET_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    verbose: bool = Field(default=False, description="详细日志输出")
    log_json: bool = Field(default=False, description="以 JSON 格式输出日志")
    output_format: Literal["yaml", "json"] = Field(default="yaml", description="文档输出格式")
    bind_address: Optional[str] = Field(default=None, description="API server 监听地址，用于排序 service CIDR")

    # 网络配置文件（若 CLI 未提供，可通过环境变量指向）
    network_file: Optional[Path] = Field(default=None, description="网络配置文件路径，可选")


__all__ = ["AppSettings"]
