"""Trakt 当日剧集 Discord 通知包。"""

from .auth import TokenRefresher, TokenState
from .config import Config
from .errors import ErrorKind, NotifierError
from .http_client import HttpClient, HttpResponse
from .metadata import ShowDetailsFetcher
from .notifier import DiscordNotifier
from .pipeline import EpisodeNotifier
from .store import TokenStore
from .trakt import EpisodeFetcher

__all__ = [
    "Config",
    "DiscordNotifier",
    "EpisodeFetcher",
    "EpisodeNotifier",
    "ErrorKind",
    "HttpClient",
    "HttpResponse",
    "NotifierError",
    "ShowDetailsFetcher",
    "TokenRefresher",
    "TokenState",
    "TokenStore",
]
