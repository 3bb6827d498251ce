"""Discord Webhook 通知。"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .config import Config
from .errors import NotifyError
from .http_client import JSON_CONTENT_TYPE, HttpClient
from .models import Episode, EpisodeDetails
from .timeutil import format_air_time

# Discord 成功接收且无返回内容时回复 204
SUCCESS_STATUS = 204


@dataclass
class DiscordNotifier:
    config: Config
    http: HttpClient

    def build_payload(
        self,
        episode: Episode,
        details: EpisodeDetails,
        air_time: datetime,
    ) -> Dict[str, Any]:
        """构建包含一个 embed 的消息体。"""

        embed: Dict[str, Any] = {
            "title": f"🚨 {episode.show_title} 🚨",
            "description": (
                "**New Episode**\n"
                f"Season {episode.season:02d}: Episode {episode.number:02d}: {episode.episode_title}\n"
                f"Next Air Date: {format_air_time(air_time)}"
            ),
            "color": self.config.discord.color,
        }
        if details.poster_url:
            embed["image"] = {"url": details.poster_url}
        if details.network_name:
            footer = {"text": f"Streaming on {details.network_name}"}
            if details.network_logo_url:
                footer["icon_url"] = details.network_logo_url
            embed["footer"] = footer
        return {"embeds": [embed]}

    def send(self, episode: Episode, details: EpisodeDetails, air_time: datetime) -> bool:
        """发送通知，仅 204 视为成功。编码失败抛出 NotifyError，网络失败抛出 TransportError。"""

        payload = self.build_payload(episode, details, air_time)
        try:
            body = json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise NotifyError(f"无法编码 Discord 通知：{exc}") from exc

        response = self.http.post(
            self.config.discord.webhook,
            body=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
        if response.status == SUCCESS_STATUS:
            logging.info("已成功发送《%s》的 Discord 通知。", episode.show_title)
            return True

        if self.config.discord.report_failures:
            logging.warning(
                "Discord 通知未成功（HTTP %s）：%s",
                response.status,
                response.body[:200],
            )
        return False
