"""
football-data.org v4 响应解析
"""

from __future__ import annotations

from typing import Any

from ..models import Match, Sport
from .common import parse_iso_datetime, to_id, to_int


def parse_matches(data: dict[str, Any]) -> list[Match]:
    """/v4/matches -> Match 列表"""
    matches = []
    for item in data["matches"]:
        full_time = (item.get("score") or {}).get("fullTime") or {}
        matches.append(Match(
            sport=Sport.SOCCER,
            home_team=item["homeTeam"]["name"],
            away_team=item["awayTeam"]["name"],
            time=parse_iso_datetime(item["utcDate"]),
            match_id=to_id(item.get("id")),
            status=item.get("status", ""),
            home_score=to_int(full_time.get("home")),
            away_score=to_int(full_time.get("away")),
        ))
    return matches


def parse_standings(data: dict[str, Any]) -> list[str]:
    """/v4/competitions/{id}/standings -> 每队一行"""
    return [
        f"{row['position']}. {row['team']['name']} - {row['points']} pts"
        for row in data["standings"][0]["table"]
    ]


def parse_player_stats(data: dict[str, Any]) -> str:
    """/v4/players/{id} -> 进球/助攻摘要"""
    return (
        f"⚽ **Player Stats for {data['name']}**\n"
        f"Goals: {data.get('goals')}\n"
        f"Assists: {data.get('assists')}"
    )
