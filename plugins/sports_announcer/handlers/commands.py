"""
体育命令：!ping / !livescores / !standings / !playerstats / !sportshelp
"""

from __future__ import annotations

from nonebot import on_message
from nonebot.adapters.onebot.v11 import MessageEvent
from nonebot.exception import FinishedException
from nonebot.log import logger

from ..router import command_router, parse_command


def is_sports_command(event: MessageEvent) -> bool:
    return parse_command(event.get_plaintext()) is not None


sports_command = on_message(rule=is_sports_command, priority=5, block=True)


@sports_command.handle()
async def handle_sports_command(event: MessageEvent):
    text = event.get_plaintext()

    try:
        reply = await command_router.dispatch(text)
    except FinishedException:
        raise
    except Exception as e:
        logger.error(f"[Sports] 处理命令失败 ({text}): {e}")
        await sports_command.finish("No data available right now, please try again later.")
        return

    if reply:
        await sports_command.finish(reply)
