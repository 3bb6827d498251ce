"""通知主流程。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .auth import TokenRefresher
from .config import Config
from .errors import NotifyError, TransportError
from .metadata import ShowDetailsFetcher
from .models import Episode, RunSummary
from .notifier import DiscordNotifier
from .timeutil import to_local, today_in
from .trakt import EpisodeFetcher


@dataclass
class EpisodeNotifier:
    """负责 orchestrate 拉取、筛选、补全与通知流程。

    致命错误（令牌、日历、时区）直接抛出，单集的失败只计数并继续。
    """

    config: Config
    refresher: TokenRefresher
    fetcher: EpisodeFetcher
    details_fetcher: ShowDetailsFetcher
    notifier: DiscordNotifier

    def run(self, today: Optional[date] = None) -> RunSummary:
        if today is None:
            today = today_in(self.config.timezone)

        headers = self.refresher.auth_headers()
        episodes = self.fetcher.fetch(headers, today)

        summary = RunSummary(total=len(episodes))
        for episode in episodes:
            outcome = self._process(episode, today)
            if outcome is None:
                summary.skipped += 1
            elif outcome:
                summary.sent += 1
            else:
                summary.failed += 1

        logging.info(
            "处理完成：总计 %s，已通知 %s，跳过 %s，失败 %s。",
            summary.total,
            summary.sent,
            summary.skipped,
            summary.failed,
        )
        return summary

    def _process(self, episode: Episode, today: date) -> Optional[bool]:
        """返回 None 表示跳过，True/False 表示是否通知成功。"""

        if not episode.first_aired:
            logging.info("《%s》没有播出时间，跳过...", episode.show_title)
            return None

        air_time = to_local(episode.first_aired, self.config.timezone)
        # 只处理当天播出的剧集
        if air_time.date() != today:
            logging.info("《%s》不在今天播出，跳过...", episode.show_title)
            return None

        if episode.show_id is None:
            logging.info("《%s》缺少 TMDB id，跳过...", episode.show_title)
            return None

        logging.info("正在获取《%s》的详情...", episode.show_title)
        details = self.details_fetcher.fetch(episode.show_id)
        if details is None:
            return False

        try:
            return self.notifier.send(episode, details, air_time)
        except (NotifyError, TransportError) as exc:
            logging.warning("发送《%s》的 Discord 通知失败：%s，跳过...", episode.show_title, exc)
            return False
