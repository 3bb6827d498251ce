"""Trakt 访问令牌检查与刷新。"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, NoReturn, Optional

from .config import Config
from .errors import DecodeError, PersistError, TokenError, TransportError
from .http_client import HttpClient
from .store import TokenStore


class TokenState(str, Enum):
    VALID = "valid"
    EXPIRED = "expired"
    REFRESHED = "refreshed"
    REFRESH_FAILED = "refresh_failed"


class TokenRefresher:
    """令牌过期时通过 OAuth refresh_token 换新令牌并写回 token.json。"""

    def __init__(
        self,
        config: Config,
        http: HttpClient,
        store: TokenStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self.http = http
        self.store = store
        self.clock = clock
        self.state: Optional[TokenState] = None

    def auth_headers(self) -> Dict[str, str]:
        """返回调用 Trakt 接口所需的请求头，必要时先刷新令牌。"""

        token = self.store.load()
        if self.clock() > token["expires_at"]:
            self.state = TokenState.EXPIRED
            logging.info("Trakt 访问令牌已过期，正在刷新...")
            token = self._refresh(token)
            self.state = TokenState.REFRESHED
        else:
            self.state = TokenState.VALID
            logging.info("使用现有的 Trakt 访问令牌。")
        return self.build_headers(token["access_token"])

    def build_headers(self, access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "trakt-api-version": self.config.trakt.api_version,
            "trakt-api-key": self.config.trakt.client_id,
        }

    def _refresh(self, token: Dict[str, Any]) -> Dict[str, Any]:
        trakt = self.config.trakt
        try:
            response = self.http.post(
                f"{trakt.base_url}/oauth/token",
                body={
                    "refresh_token": token["refresh_token"],
                    "client_id": trakt.client_id,
                    "client_secret": trakt.client_secret,
                    "grant_type": "refresh_token",
                },
            )
        except TransportError as exc:
            self._fail(f"刷新 Trakt 令牌时网络错误：{exc}", exc)

        if not response.ok or not response.body:
            self._fail(f"刷新 Trakt 令牌失败，HTTP {response.status}")

        try:
            payload = response.json()
        except DecodeError as exc:
            self._fail(f"无法读取 Trakt 返回的令牌：{exc}", exc)

        if (
            not isinstance(payload, dict)
            or not payload.get("access_token")
            or not isinstance(payload.get("expires_in"), (int, float))
        ):
            self._fail("Trakt 返回的令牌缺少 access_token 或 expires_in")

        now = self.clock()
        refreshed = dict(token)
        refreshed.update(payload)
        refreshed["expires_at"] = int(now + payload["expires_in"])

        logging.info("访问令牌刷新成功，正在保存...")
        try:
            self.store.save(refreshed)
        except PersistError:
            self.state = TokenState.REFRESH_FAILED
            raise
        return refreshed

    def _fail(self, message: str, cause: Optional[Exception] = None) -> NoReturn:
        self.state = TokenState.REFRESH_FAILED
        raise TokenError(message) from cause
