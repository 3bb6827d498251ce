"""TMDB 剧集元数据抓取模块。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Config
from .errors import DecodeError, TransportError
from .http_client import HttpClient
from .models import EpisodeDetails


@dataclass
class ShowDetailsFetcher:
    """按 TMDB id 抓取海报与播出平台。失败时返回 None，由调用方跳过该集。"""

    config: Config
    http: HttpClient

    def fetch(self, show_id: int) -> Optional[EpisodeDetails]:
        tmdb = self.config.tmdb
        try:
            response = self.http.get(f"{tmdb.base_url}/{show_id}?api_key={tmdb.api_key}")
        except TransportError as exc:
            logging.warning("请求 TMDB 失败：%s", exc)
            return None

        if not response.ok or not response.body:
            logging.warning("无法从 TMDB 获取海报与平台信息（HTTP %s），跳过...", response.status)
            return None

        try:
            payload = response.json()
        except DecodeError as exc:
            logging.warning("无法读取 TMDB 返回的剧集详情：%s，跳过...", exc)
            return None

        if not isinstance(payload, dict):
            logging.warning("TMDB 返回的剧集详情不是对象，跳过...")
            return None

        try:
            return self.extract(payload)
        except (AttributeError, KeyError, TypeError) as exc:
            logging.warning("TMDB 返回的剧集详情格式错误：%s，跳过...", exc)
            return None

    def extract(self, payload: dict) -> EpisodeDetails:
        networks = payload.get("networks")
        network: dict = {}
        if isinstance(networks, list) and networks and isinstance(networks[0], dict):
            network = networks[0]
        return EpisodeDetails(
            poster_url=self._asset_url(payload.get("poster_path")),
            network_name=network.get("name") or None,
            network_logo_url=self._asset_url(network.get("logo_path")),
        )

    def _asset_url(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return f"{self.config.tmdb.poster_base_url}{path}"
