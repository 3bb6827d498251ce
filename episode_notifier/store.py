"""JSON 文件读写，以及 token.json 的存取。"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

from .errors import ConfigError, PersistError, TokenError

REQUIRED_TOKEN_FIELDS = ("access_token", "refresh_token", "expires_at")


def load_json(path: str) -> Any:
    """读取并解析 JSON 文件。文件不存在或内容非法时抛出 ConfigError。"""

    if not os.path.exists(path):
        raise ConfigError(f"找不到文件：{path}")
    try:
        with open(path, "r", encoding="utf-8") as fp:
            return json.load(fp)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} 不是合法的 JSON：{exc}") from exc
    except OSError as exc:
        raise ConfigError(f"无法读取 {path}：{exc}") from exc


def _discard(path: str) -> None:
    if not os.path.exists(path):
        return
    try:
        os.remove(path)
    except OSError as exc:
        logging.warning("无法清理临时文件 %s：%s", path, exc)


def save_json(path: str, data: Any) -> None:
    """以缩进格式写入 JSON 文件，失败时抛出 PersistError。"""

    try:
        payload = json.dumps(data, ensure_ascii=False, indent=4)
    except (TypeError, ValueError) as exc:
        raise PersistError(f"无法序列化 {path}：{exc}") from exc

    # 临时文件 + 原子替换，写到一半中断时不会留下损坏的文件
    tmp = f"{path}.tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as fp:
            fp.write(payload)
        os.replace(tmp, path)
    except OSError as exc:
        _discard(tmp)
        raise PersistError(f"写入 {path} 失败：{exc}") from exc


@dataclass
class TokenStore:
    """管理 token.json 的读写。"""

    path: str

    def load(self) -> Dict[str, Any]:
        data = load_json(self.path)
        if not isinstance(data, dict):
            raise TokenError(f"{self.path} 需要是 JSON 对象")
        missing = [name for name in REQUIRED_TOKEN_FIELDS if name not in data]
        if missing:
            raise TokenError(f"{self.path} 缺少字段：{', '.join(missing)}")
        if not isinstance(data["expires_at"], (int, float)):
            raise TokenError(f"{self.path} 中的 expires_at 必须是时间戳（秒）")
        return data

    def save(self, token: Dict[str, Any]) -> None:
        save_json(self.path, token)
