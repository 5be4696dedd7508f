"""
消息文本渲染（纯函数）
"""

from __future__ import annotations

from datetime import tzinfo

from .models import SPORT_EMOJIS, Match


def render_announcement(match: Match, tz: tzinfo) -> str:
    """开赛前播报"""
    kickoff = match.time.astimezone(tz).strftime("%H:%M:%S")
    return (
        f"📢 **Upcoming {match.sport.value} Match!**\n"
        f"{match.home_team} vs {match.away_team}\n"
        f"Kickoff at {kickoff}"
    )


def render_live_score(match: Match) -> str:
    """实时比分，一场一行；比分缺失时显示 ?"""
    home = "?" if match.home_score is None else match.home_score
    away = "?" if match.away_score is None else match.away_score
    return f"{SPORT_EMOJIS[match.sport]} {match.home_team} {home} - {away} {match.away_team}"


def render_help(default_league: str = "PL") -> str:
    return f"""📖 Sports commands

• !ping - check that the bot is alive
• !livescores - scores of matches in progress
• !standings <Soccer|NFL> [leagueId] - league standings (Soccer defaults to {default_league})
• !playerstats <player> <Soccer|NFL> - player stats
• !sportshelp - show this help"""
