# -*- coding: utf-8 -*-
"""当日剧集 Discord 通知脚本入口。

适合由 cron 每天调用一次，实现位于 :mod:`episode_notifier` 包内。
config.json 与 token.json 默认放在本脚本所在目录。
"""

from __future__ import annotations

import os
import sys

from episode_notifier.cli import main


if __name__ == "__main__":
    sys.exit(main(base_dir=os.path.dirname(os.path.abspath(__file__))))
