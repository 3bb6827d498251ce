"""命令行入口。"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .auth import TokenRefresher
from .config import Config, configure_logging, default_path
from .errors import NotifierError
from .http_client import HttpClient
from .metadata import ShowDetailsFetcher
from .notifier import DiscordNotifier
from .pipeline import EpisodeNotifier
from .store import TokenStore
from .trakt import EpisodeFetcher


def build_notifier(
    config_path: Optional[str] = None,
    token_path: Optional[str] = None,
    base_dir: Optional[str] = None,
) -> EpisodeNotifier:
    """构建带依赖的通知流程实例，用于脚本或其他调用者复用。

    未指定 base_dir 时在当前工作目录查找 config.json 与 token.json。
    """

    config = Config.from_file(
        config_path or default_path("NOTIFIER_CONFIG_FILE", "config.json", base_dir)
    )
    configure_logging(config.log_level)

    http = HttpClient(timeout=config.request_timeout)
    store = TokenStore(token_path or default_path("NOTIFIER_TOKEN_FILE", "token.json", base_dir))
    return EpisodeNotifier(
        config=config,
        refresher=TokenRefresher(config=config, http=http, store=store),
        fetcher=EpisodeFetcher(config=config, http=http),
        details_fetcher=ShowDetailsFetcher(config=config, http=http),
        notifier=DiscordNotifier(config=config, http=http),
    )


def main(base_dir: Optional[str] = None) -> int:
    """命令行执行入口，返回进程退出码。"""

    # 配置尚未加载时也要能输出错误
    configure_logging("INFO")
    try:
        notifier = build_notifier(base_dir=base_dir)
        notifier.run()
    except NotifierError as exc:
        logging.error("运行中止（%s）：%s", exc.kind.value, exc)
        return 1

    logging.info("完成。")
    return 0


if __name__ == "__main__":
    sys.exit(main())
