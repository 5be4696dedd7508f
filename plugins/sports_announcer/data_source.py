"""体育数据源 - football-data.org（足球）与 Sportradar（NFL）"""

from __future__ import annotations

from typing import Optional, Union

import httpx
from nonebot.log import logger

from .config import Config, plugin_config
from .http_client import SportsHttpClient
from .models import Match, Sport
from .parsers import nfl, soccer
from .render import render_live_score

# 网络错误与上游数据结构异常统一视为“拿不到数据”
FETCH_ERRORS = (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError)


class SportsDataSource:
    """体育数据源

    所有方法在失败时记录日志并返回约定的失败值，不向外抛异常：
    - 比赛/积分榜：空列表（与“没有数据”无法区分）
    - 球员数据：“Unable to fetch stats for ...” 文本
    - 不支持的运动：None
    """

    def __init__(self, config: Config, client: Optional[SportsHttpClient] = None):
        self._config = config
        self._client = client or SportsHttpClient(timeout=config.sports_timeout)

    async def close(self):
        """关闭会话"""
        await self._client.close()

    # ==================== 请求封装 ====================

    async def _get_soccer(self, path: str):
        """football-data.org：API key 放在 X-Auth-Token 请求头"""
        return await self._client.get_json(
            f"{self._config.sports_soccer_base_url}{path}",
            headers={"X-Auth-Token": self._config.football_api_key},
        )

    async def _get_nfl(self, path: str):
        """Sportradar：API key 放在 api_key 查询参数"""
        return await self._client.get_json(
            f"{self._config.sports_nfl_base_url}{path}",
            params={"api_key": self._config.american_football_api_key},
        )

    # ==================== 比赛 ====================

    async def fetch_soccer_matches(self) -> list[Match]:
        """获取当前足球比赛"""
        try:
            data = await self._get_soccer("/v4/matches")
            return soccer.parse_matches(data)
        except FETCH_ERRORS as e:
            logger.error(f"[Sports] 获取足球比赛失败: {e}")
            return []

    async def fetch_nfl_matches(
        self,
        season: Optional[str] = None,
        week: Optional[str] = None,
        type: Optional[str] = None,
    ) -> list[Match]:
        """获取 NFL 周赛程，参数缺省时取配置中的赛季/周次/类型"""
        season = season or self._config.sports_nfl_season
        week = week or self._config.sports_nfl_week
        type = type or self._config.sports_nfl_type
        try:
            data = await self._get_nfl(f"/games/{season}/{type}/{week}/schedule.json")
            return nfl.parse_schedule(data)
        except FETCH_ERRORS as e:
            logger.error(f"[Sports] 获取 NFL 比赛失败: {e}")
            return []

    async def fetch_live_scores(self) -> list[str]:
        """获取进行中比赛的实时比分（每场一行）"""
        matches = await self.fetch_soccer_matches() + await self.fetch_nfl_matches()
        return [render_live_score(m) for m in matches if m.is_live]

    # ==================== 积分榜 ====================

    async def fetch_standings(
        self, sport: Union[Sport, str], league_id: Optional[str] = None
    ) -> Optional[list[str]]:
        """获取积分榜；不支持的运动返回 None"""
        sport = Sport.resolve(sport)
        try:
            if sport is Sport.SOCCER:
                league = league_id or self._config.sports_default_league
                data = await self._get_soccer(f"/v4/competitions/{league}/standings")
                return soccer.parse_standings(data)
            if sport is Sport.AMERICAN_FOOTBALL:
                season = self._config.sports_nfl_season
                data = await self._get_nfl(f"/seasons/{season}/REG/standings.json")
                return nfl.parse_standings(data)
        except FETCH_ERRORS as e:
            logger.error(f"[Sports] 获取 {sport.value} 积分榜失败: {e}")
            return []
        return None

    # ==================== 球员 ====================

    async def fetch_player_stats(self, player: str, sport: Union[Sport, str]) -> Optional[str]:
        """获取球员数据；两个上游的球员标识互不通用"""
        sport = Sport.resolve(sport)
        try:
            if sport is Sport.SOCCER:
                data = await self._get_soccer(f"/v4/players/{player}")
                return soccer.parse_player_stats(data)
            if sport is Sport.AMERICAN_FOOTBALL:
                data = await self._get_nfl(f"/players/{player}/profile.json")
                return nfl.parse_player_stats(data)
        except FETCH_ERRORS as e:
            logger.error(f"[Sports] 获取球员 {player} 数据失败: {e}")
            return f"Unable to fetch stats for {player}."
        return None


# 全局数据源实例
sports_data = SportsDataSource(plugin_config)
