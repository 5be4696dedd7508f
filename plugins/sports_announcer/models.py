"""
体育数据模型（dataclasses）
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class Sport(str, Enum):
    """运动类型（value 即播报中显示的名称）"""

    SOCCER = "Soccer"
    AMERICAN_FOOTBALL = "American Football"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["Sport"]:
        """解析命令中的运动标签（Soccer / NFL），不区分大小写；未知返回 None"""
        return SPORT_TAGS.get((tag or "").strip().lower())

    @classmethod
    def resolve(cls, sport: Union["Sport", str, None]) -> Optional["Sport"]:
        if isinstance(sport, cls):
            return sport
        return cls.from_tag(sport or "")


SPORT_TAGS: dict[str, Sport] = {
    "soccer": Sport.SOCCER,
    "nfl": Sport.AMERICAN_FOOTBALL,
    "american football": Sport.AMERICAN_FOOTBALL,
}

SPORT_EMOJIS: dict[Sport, str] = {
    Sport.SOCCER: "⚽",
    Sport.AMERICAN_FOOTBALL: "🏈",
}

# 上游表示“进行中”的状态值
LIVE_STATUSES: dict[Sport, frozenset[str]] = {
    Sport.SOCCER: frozenset({"IN_PLAY", "PAUSED"}),
    Sport.AMERICAN_FOOTBALL: frozenset({"inprogress", "halftime"}),
}


@dataclass(frozen=True)
class Match:
    """比赛信息"""
    sport: Sport
    home_team: str
    away_team: str
    time: datetime  # 开赛时间（带时区）
    match_id: str = ""
    status: str = ""
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def is_live(self) -> bool:
        return self.status in LIVE_STATUSES[self.sport]

    @property
    def key(self) -> str:
        """比赛唯一标识，用作播报任务的幂等键"""
        if self.match_id:
            return f"{self.sport.name.lower()}_{self.match_id}"
        return (
            f"{self.sport.name.lower()}_{self.home_team}_{self.away_team}_"
            f"{int(self.time.timestamp())}"
        )
