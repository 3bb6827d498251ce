"""Trakt 日历接口。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Mapping

from .config import Config
from .errors import DecodeError, FetchError, TransportError
from .http_client import HttpClient
from .models import Episode


@dataclass
class EpisodeFetcher:
    """拉取指定日期起若干天内即将播出的剧集。"""

    config: Config
    http: HttpClient

    def calendar_url(self, today: date) -> str:
        return (
            f"{self.config.trakt.base_url}/calendars/my/shows/"
            f"{today.strftime('%Y-%m-%d')}/{self.config.calendar_days}"
        )

    def fetch(self, headers: Mapping[str, str], today: date) -> List[Episode]:
        logging.info("正在从 Trakt 拉取剧集日历...")
        try:
            response = self.http.get(self.calendar_url(today), headers=headers)
        except TransportError as exc:
            raise FetchError(f"拉取 Trakt 日历失败：{exc}") from exc

        if not response.ok or not response.body:
            raise FetchError(f"拉取 Trakt 日历失败，HTTP {response.status}")

        return self.decode(response.json())

    @staticmethod
    def decode(payload: object) -> List[Episode]:
        if not isinstance(payload, list):
            raise DecodeError("Trakt 日历响应需要是数组")

        episodes: List[Episode] = []
        for index, record in enumerate(payload):
            if not isinstance(record, dict):
                raise DecodeError(f"第 {index} 条日历记录不是对象")
            try:
                episodes.append(Episode.from_record(record))
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise DecodeError(f"第 {index} 条日历记录格式错误：{exc}") from exc

        logging.debug("日历共返回 %s 集。", len(episodes))
        return episodes
