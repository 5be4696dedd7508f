"""
播报频道发送（频道在发送时才解析）
"""

from __future__ import annotations

from typing import Protocol

from nonebot import get_bot
from nonebot.adapters.onebot.v11 import ActionFailed, Bot, NetworkError
from nonebot.log import logger


class ChannelNotifier(Protocol):
    async def send_to_channel(self, channel_id: int, message: str) -> bool:
        """发送成功返回 True；频道无法解析或发送失败返回 False"""
        ...


class GroupNotifier:
    """OneBot v11：频道即群号"""

    async def _resolve_bot(self, channel_id: int):
        try:
            bot = get_bot()
        except ValueError:
            return None
        if not isinstance(bot, Bot):
            return None

        try:
            await bot.get_group_info(group_id=channel_id)
        except (ActionFailed, NetworkError):
            return None
        return bot

    async def send_to_channel(self, channel_id: int, message: str) -> bool:
        bot = await self._resolve_bot(channel_id)
        if bot is None:
            logger.debug(f"[Sports] 频道 {channel_id} 当前无法解析，跳过播报")
            return False

        try:
            await bot.send_group_msg(group_id=channel_id, message=message)
        except (ActionFailed, NetworkError) as e:
            logger.error(f"[Sports] 发送播报到群 {channel_id} 失败: {e}")
            return False
        return True
