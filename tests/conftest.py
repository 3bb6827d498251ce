import json

import pytest

from episode_notifier.config import Config
from episode_notifier.http_client import HttpResponse
from episode_notifier.store import TokenStore

TRAKT_BASE = "https://api.trakt.test"
TMDB_BASE = "https://api.tmdb.test/3/tv"
POSTER_BASE = "https://image.tmdb.test/t/p/original"
WEBHOOK = "https://discord.test/api/webhooks/1/abc"

NOW = 1_736_700_000


class FakeHttp:
    """按 URL 前缀返回预设响应，并记录所有调用。"""

    def __init__(self):
        self.routes = []
        self.calls = []

    def add(self, method, prefix, status=200, body="", exc=None):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.routes.append((method, prefix, status, body, exc))

    def request(self, url, method, body=None, headers=None):
        self.calls.append({"url": url, "method": method, "body": body, "headers": headers})
        for route_method, prefix, status, route_body, exc in self.routes:
            if route_method == method and url.startswith(prefix):
                if exc is not None:
                    raise exc
                return HttpResponse(status=status, body=route_body)
        raise AssertionError(f"unexpected request: {method} {url}")

    def get(self, url, headers=None):
        return self.request(url, "GET", headers=headers)

    def post(self, url, body=None, headers=None):
        return self.request(url, "POST", body=body, headers=headers)

    def calls_to(self, prefix):
        return [call for call in self.calls if call["url"].startswith(prefix)]


def config_dict(**overrides):
    data = {
        "timezone": "America/New_York",
        "discord": {"webhook": WEBHOOK},
        "tmdb": {
            "base_url": TMDB_BASE,
            "poster_base_url": POSTER_BASE,
            "api_key": "tmdb-key",
        },
        "trakt": {
            "base_url": TRAKT_BASE,
            "client_id": "client-id",
            "client_secret": "client-secret",
        },
    }
    data.update(overrides)
    return data


@pytest.fixture
def config():
    return Config.from_dict(config_dict())


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def token_path(tmp_path):
    path = tmp_path / "token.json"
    path.write_text(
        json.dumps(
            {
                "access_token": "old-access",
                "refresh_token": "old-refresh",
                "expires_at": NOW + 3600,
                "scope": "public",
                "created_at": NOW - 86400,
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def token_store(token_path):
    return TokenStore(str(token_path))
