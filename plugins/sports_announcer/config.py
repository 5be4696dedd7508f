"""体育播报插件配置"""

from typing import Optional

import pytz
from pydantic import BaseModel, field_validator
from nonebot import get_plugin_config


class Config(BaseModel):
    """体育播报插件配置"""

    # 上游 API 密钥（沿用环境变量名 FOOTBALL_API_KEY / AMERICAN_FOOTBALL_API_KEY）
    football_api_key: str = ""
    american_football_api_key: str = ""

    # 上游 API 地址
    sports_soccer_base_url: str = "https://api.football-data.org"
    sports_nfl_base_url: str = "https://api.sportsradar.com/nfl/official/trial/v7/en"

    # 请求配置
    sports_timeout: float = 10.0  # 单次请求超时（秒）

    # 播报配置
    sports_announce_channel: Optional[int] = None  # 播报群号，未配置则不播报
    sports_announce_lead_minutes: int = 10  # 开赛前多少分钟播报
    sports_timezone: str = "UTC"  # 开赛时间显示时区

    # 默认参数
    sports_default_league: str = "PL"
    sports_nfl_season: str = "2025"
    sports_nfl_week: str = "1"
    sports_nfl_type: str = "REG"

    @field_validator("sports_announce_channel")
    @classmethod
    def _check_channel(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("sports_announce_channel 必须是正整数群号")
        return v

    @field_validator("sports_timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        if v not in pytz.all_timezones_set:
            raise ValueError(f"未知时区: {v}")
        return v

    @field_validator("sports_timeout")
    @classmethod
    def _check_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("sports_timeout 必须大于 0")
        return v


# 获取配置
plugin_config = get_plugin_config(Config)
