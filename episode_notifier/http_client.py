"""HTTP 客户端封装。"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import requests

from .errors import DecodeError, NotifyError, TransportError

JSON_CONTENT_TYPE = "application/json"

Body = Union[Mapping[str, Any], str, None]


@dataclass
class HttpResponse:
    """一次请求的状态码与响应体。"""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status == 200

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except ValueError as exc:
            raise DecodeError(f"响应不是合法的 JSON：{exc}") from exc


def _is_json(headers: Optional[Mapping[str, str]]) -> bool:
    if not headers:
        return False
    for key, value in headers.items():
        if key.lower() == "content-type" and value.split(";")[0].strip().lower() == JSON_CONTENT_TYPE:
            return True
    return False


@dataclass
class HttpClient:
    """负责发出阻塞式 HTTP 请求，非 2xx 不抛异常，由调用方检查状态码。"""

    timeout: float
    session: Optional[requests.Session] = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def request(
        self,
        url: str,
        method: str,
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse:
        data: Any = None
        if isinstance(body, str):
            data = body.encode("utf-8")
        elif body:
            if _is_json(headers):
                try:
                    data = json.dumps(body, ensure_ascii=False).encode("utf-8")
                except (TypeError, ValueError) as exc:
                    raise NotifyError(f"无法编码 JSON 请求体：{exc}") from exc
            else:
                data = dict(body)

        # 查询串里可能带 api_key，日志只记录路径
        logging.debug("%s %s", method, url.split("?", 1)[0])
        assert self.session is not None  # appease type checkers
        try:
            response = self.session.request(
                method=method,
                url=url,
                data=data,
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} 请求失败：{exc}") from exc

        return HttpResponse(status=response.status_code, body=response.text or "")

    def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> HttpResponse:
        return self.request(url, "GET", headers=headers)

    def post(
        self,
        url: str,
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse:
        return self.request(url, "POST", body=body, headers=headers)
