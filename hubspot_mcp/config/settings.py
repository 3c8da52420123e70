"""配置管理模块。

支持从 .env、config.yaml 以及环境变量加载配置。
HubSpot 凭证只从环境变量 / .env 读取时最安全，YAML 中一般只放非敏感项。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("HUBSPOT_MCP_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if not path or path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class HubSpotSettings(BaseSettings):
    """配置设置（使用 Pydantic）。"""

    # ---- HubSpot 凭证 ----
    # api_key 与 access_token 二选一即可，两者都有时优先使用 api_key
    hubspot_api_key: Optional[str] = Field(default=None, description="HubSpot 私有 API Key")
    hubspot_access_token: Optional[str] = Field(
        default=None,
        description="HubSpot Private App / OAuth 访问令牌",
    )
    # 当前所有工具都不使用 client id/secret，仅保留配置位
    hubspot_client_id: Optional[str] = Field(default=None, description="HubSpot OAuth client id")
    hubspot_client_secret: Optional[str] = Field(default=None, description="HubSpot OAuth client secret")
    hubspot_base_url: str = Field(
        default="https://api.hubapi.com",
        description="HubSpot API 基础URL",
    )
    http_timeout: float = Field(default=30.0, ge=1.0, description="HTTP 超时时间（秒）")

    # ---- MCP Server ----
    server_name: str = Field(default="hubspot-mcp-server", description="MCP server 名称")
    server_version: str = Field(default="1.0.0", description="MCP server 版本")

    # ---- 日志 ----
    log_dir: str = Field(default="logs", description="日志目录")
    log_level: str = Field(default="INFO", description="日志级别")
    log_redact_content: bool = Field(default=False, description="是否脱敏日志内容")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("hubspot_api_key", "hubspot_access_token")
    @classmethod
    def validate_credential(cls, v: Optional[str]) -> Optional[str]:
        if v and len(v) < 10:
            raise ValueError("HubSpot credential seems too short")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return (v or "INFO").upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = HubSpotSettings()

# 类型别名，让外部代码可以使用 Settings 类型
Settings = type(settings)
