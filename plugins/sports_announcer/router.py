"""
聊天命令解析与分发

每条消息按空白切分，首个 token 必须精确匹配已知命令，否则不回复。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .config import plugin_config
from .data_source import SportsDataSource, sports_data
from .models import Sport
from .render import render_help

PING = "!ping"
LIVESCORES = "!livescores"
STANDINGS = "!standings"
PLAYERSTATS = "!playerstats"
SPORTSHELP = "!sportshelp"

COMMANDS = frozenset({PING, LIVESCORES, STANDINGS, PLAYERSTATS, SPORTSHELP})


@dataclass(frozen=True)
class Command:
    name: str
    args: tuple[str, ...] = ()


def parse_command(text: str) -> Optional[Command]:
    tokens = (text or "").split()
    if not tokens or tokens[0] not in COMMANDS:
        return None
    return Command(name=tokens[0], args=tuple(tokens[1:]))


class CommandRouter:
    """命令分发，返回回复文本；None 表示不回复"""

    def __init__(self, data_source: SportsDataSource, default_league: str = "PL"):
        self._data_source = data_source
        self._default_league = default_league
        self._handlers: dict[str, Callable[[tuple[str, ...]], Awaitable[str]]] = {
            PING: self._ping,
            LIVESCORES: self._livescores,
            STANDINGS: self._standings,
            PLAYERSTATS: self._playerstats,
            SPORTSHELP: self._help,
        }

    async def dispatch(self, text: str) -> Optional[str]:
        command = parse_command(text)
        if command is None:
            return None
        return await self._handlers[command.name](command.args)

    async def _ping(self, args: tuple[str, ...]) -> str:
        return "Pong!"

    async def _help(self, args: tuple[str, ...]) -> str:
        return render_help(self._default_league)

    async def _livescores(self, args: tuple[str, ...]) -> str:
        scores = await self._data_source.fetch_live_scores()
        if scores:
            return "\n".join(scores)
        return "No live matches at the moment."

    async def _standings(self, args: tuple[str, ...]) -> str:
        if not args:
            return f"Usage: {STANDINGS} <Soccer|NFL> [leagueId]"

        sport = args[0]
        league = args[1] if len(args) > 1 else self._default_league
        standings = await self._data_source.fetch_standings(sport, league)
        if standings:
            return "\n".join(standings)
        return f"No standings available for {sport}."

    async def _playerstats(self, args: tuple[str, ...]) -> str:
        if len(args) < 2:
            return f"Usage: {PLAYERSTATS} <playerName> <Soccer|NFL>"

        player, sport = args[0], args[1]
        if Sport.from_tag(sport) is None:
            return f"Unsupported sport: {sport}."
        stats = await self._data_source.fetch_player_stats(player, sport)
        return stats or f"Unable to fetch stats for {player}."


# 全局路由实例
command_router = CommandRouter(sports_data, plugin_config.sports_default_league)
