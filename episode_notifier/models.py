"""领域模型定义。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Episode:
    """日历接口返回的一集。"""

    show_id: Optional[int]
    show_title: str
    episode_title: str
    season: int
    number: int
    first_aired: Optional[str]

    @classmethod
    def from_record(cls, record: dict) -> "Episode":
        """从 Trakt 日历记录构建。缺少 show/episode 对象时抛出 KeyError 或 TypeError。"""

        show = record["show"]
        episode = record["episode"]
        if not isinstance(show, dict) or not isinstance(episode, dict):
            raise TypeError("show / episode 字段必须是对象")
        ids = show.get("ids") or {}
        return cls(
            show_id=ids.get("tmdb"),
            show_title=show.get("title") or "",
            episode_title=episode.get("title") or "",
            season=int(episode.get("season") or 0),
            number=int(episode.get("number") or 0),
            first_aired=record.get("first_aired"),
        )


@dataclass
class EpisodeDetails:
    """TMDB 返回的海报与播出平台信息，资源路径已拼成完整 URL。"""

    poster_url: Optional[str]
    network_name: Optional[str]
    network_logo_url: Optional[str]


@dataclass
class RunSummary:
    """一次运行的统计结果。"""

    total: int = 0
    sent: int = 0
    skipped: int = 0
    failed: int = 0
