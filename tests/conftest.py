from typing import Callable

import httpx
import nonebot
import pytest

nonebot.init(
    football_api_key="soccer-key",
    american_football_api_key="nfl-key",
    sports_announce_channel=123456,
)
nonebot.load_plugin("plugins.sports_announcer")

from plugins.sports_announcer.config import Config  # noqa: E402
from plugins.sports_announcer.data_source import SportsDataSource  # noqa: E402
from plugins.sports_announcer.http_client import SportsHttpClient  # noqa: E402

from .samples import NFL_BASE, SOCCER_BASE, upstream_handler  # noqa: E402


@pytest.fixture
def config() -> Config:
    return Config(
        football_api_key="soccer-key",
        american_football_api_key="nfl-key",
        sports_soccer_base_url=SOCCER_BASE,
        sports_nfl_base_url=NFL_BASE,
    )


@pytest.fixture
def make_source(config: Config) -> Callable[..., SportsDataSource]:
    """用 httpx.MockTransport 构造数据源，handler 默认返回样例数据"""
    def _make(handler=upstream_handler) -> SportsDataSource:
        client = SportsHttpClient(timeout=5, transport=httpx.MockTransport(handler))
        return SportsDataSource(config, client)

    return _make
