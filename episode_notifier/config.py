"""配置加载模块。"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigError
from .store import load_json

# 与旧脚本保持一致的默认值
DEFAULT_CALENDAR_DAYS = 2
DEFAULT_EMBED_COLOR = 9838011
DEFAULT_TIMEOUT = 20
DEFAULT_TRAKT_API_VERSION = "2"


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if not isinstance(value, dict):
        raise ConfigError(f"配置缺少 {name} 节点")
    return value


def _require_str(section: Dict[str, Any], key: str, prefix: str) -> str:
    value = section.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"配置项 {prefix}{key} 必须是非空字符串")
    return value


@dataclass(frozen=True)
class TraktConfig:
    base_url: str
    client_id: str
    client_secret: str
    api_version: str = DEFAULT_TRAKT_API_VERSION


@dataclass(frozen=True)
class TmdbConfig:
    base_url: str
    poster_base_url: str
    api_key: str


@dataclass(frozen=True)
class DiscordConfig:
    webhook: str
    color: int = DEFAULT_EMBED_COLOR
    report_failures: bool = True


@dataclass(frozen=True)
class Config:
    """一次运行所需的全部配置，加载后不可变。"""

    timezone: str
    discord: DiscordConfig
    tmdb: TmdbConfig
    trakt: TraktConfig
    calendar_days: int = DEFAULT_CALENDAR_DAYS
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, path: str) -> "Config":
        """读取 config.json。"""

        data = load_json(path)
        if not isinstance(data, dict):
            raise ConfigError(f"{path} 需要是 JSON 对象")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        discord = _section(data, "discord")
        tmdb = _section(data, "tmdb")
        trakt = _section(data, "trakt")

        color = discord.get("color", DEFAULT_EMBED_COLOR)
        if not isinstance(color, int) or isinstance(color, bool):
            raise ConfigError("配置项 discord.color 必须是整数")

        calendar_days = data.get("calendar_days", DEFAULT_CALENDAR_DAYS)
        if not isinstance(calendar_days, int) or isinstance(calendar_days, bool) or calendar_days < 1:
            raise ConfigError("配置项 calendar_days 必须是正整数")

        timeout = data.get("request_timeout", DEFAULT_TIMEOUT)
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ConfigError("配置项 request_timeout 必须是正数（秒）")

        return cls(
            timezone=_require_str(data, "timezone", ""),
            discord=DiscordConfig(
                webhook=_require_str(discord, "webhook", "discord."),
                color=color,
                report_failures=bool(discord.get("report_failures", True)),
            ),
            tmdb=TmdbConfig(
                base_url=_require_str(tmdb, "base_url", "tmdb.").rstrip("/"),
                poster_base_url=_require_str(tmdb, "poster_base_url", "tmdb."),
                api_key=_require_str(tmdb, "api_key", "tmdb."),
            ),
            trakt=TraktConfig(
                base_url=_require_str(trakt, "base_url", "trakt.").rstrip("/"),
                client_id=_require_str(trakt, "client_id", "trakt."),
                client_secret=_require_str(trakt, "client_secret", "trakt."),
                api_version=str(trakt.get("api_version", DEFAULT_TRAKT_API_VERSION)),
            ),
            calendar_days=calendar_days,
            request_timeout=timeout,
            log_level=str(data.get("log_level", "INFO")),
        )


def default_path(env_name: str, filename: str, base_dir: Optional[str] = None) -> str:
    """环境变量优先，否则取 base_dir（缺省为当前工作目录）下的同名文件。"""

    override = os.getenv(env_name)
    if override:
        return override
    return os.path.join(base_dir or os.getcwd(), filename)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s: %(message)s",
    )
    # 维持同一格式，重复调用时只调整级别
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
