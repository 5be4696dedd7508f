"""
Sportradar NFL v7 响应解析
"""

from __future__ import annotations

from typing import Any

from ..models import Match, Sport
from .common import parse_iso_datetime, to_id, to_int


def parse_schedule(data: dict[str, Any]) -> list[Match]:
    """games/{season}/{type}/{week}/schedule.json -> Match 列表

    周赛程接口把比赛放在 week.games 下，兼容顶层 games。
    """
    games = data["games"] if "games" in data else data["week"]["games"]

    matches = []
    for game in games:
        scoring = game.get("scoring") or {}
        matches.append(Match(
            sport=Sport.AMERICAN_FOOTBALL,
            home_team=game["home"]["name"],
            away_team=game["away"]["name"],
            time=parse_iso_datetime(game["scheduled"]),
            match_id=to_id(game.get("id")),
            status=game.get("status", ""),
            home_score=to_int(scoring.get("home_points")),
            away_score=to_int(scoring.get("away_points")),
        ))
    return matches


def parse_standings(data: dict[str, Any]) -> list[str]:
    """seasons/{season}/REG/standings.json -> 每个分区一段"""
    blocks = []
    for conference in data["conferences"]:
        for division in conference["divisions"]:
            lines = [
                f"{team['market']} {team['name']} - {team['wins']}-{team['losses']}"
                for team in division["teams"]
            ]
            blocks.append(f"🏈 **{division['name']}**\n" + "\n".join(lines))
    return blocks


def parse_player_stats(data: dict[str, Any]) -> str:
    """players/{id}/profile.json -> 传球码数/达阵摘要"""
    return (
        f"🏈 **Player Stats for {data['name']}**\n"
        f"Passing Yards: {data['passing']['yards']}\n"
        f"Touchdowns: {data.get('touchdowns')}"
    )
