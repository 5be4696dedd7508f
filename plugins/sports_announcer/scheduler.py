"""体育播报定时任务模块"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Any, Optional

import pytz
from nonebot import get_driver, require
from nonebot.adapters import Bot
from nonebot.log import logger

require("nonebot_plugin_apscheduler")
from nonebot_plugin_apscheduler import scheduler

from .config import plugin_config
from .data_source import SportsDataSource, sports_data
from .models import Match
from .notifier import ChannelNotifier, GroupNotifier
from .render import render_announcement

ANNOUNCE_JOB_PREFIX = "sports_announce_"


def announce_job_id(channel_id: int, match: Match) -> str:
    return f"{ANNOUNCE_JOB_PREFIX}{channel_id}_{match.key}"


class AnnouncementScheduler:
    """开赛前播报调度器

    job_scheduler 只需提供 apscheduler 风格的 add_job；
    notifier 负责在触发时解析频道并发送。
    """

    def __init__(
        self,
        data_source: SportsDataSource,
        job_scheduler: Any,
        notifier: ChannelNotifier,
        *,
        lead_minutes: int = 10,
        tz: Optional[tzinfo] = None,
    ):
        self._data_source = data_source
        self._jobs = job_scheduler
        self._notifier = notifier
        self._lead = timedelta(minutes=lead_minutes)
        self._tz = tz or pytz.utc

    def announce_time(self, match: Match) -> datetime:
        return match.time - self._lead

    async def schedule_announcements(self, channel_id: int) -> int:
        """抓取一次足球与 NFL 比赛，为每场注册一次性播报任务

        已过去的触发时间同样注册，由 apscheduler 的 misfire 机制决定是否执行。
        job id 由比赛标识生成，重复调用只会替换已有任务。

        Returns:
            注册的任务数量
        """
        soccer_matches = await self._data_source.fetch_soccer_matches()
        nfl_matches = await self._data_source.fetch_nfl_matches()
        all_matches = soccer_matches + nfl_matches

        count = 0
        for match in all_matches:
            job_id = announce_job_id(channel_id, match)
            try:
                self._jobs.add_job(
                    self.announce,
                    trigger="date",
                    run_date=self.announce_time(match),
                    args=[channel_id, match],
                    id=job_id,
                    replace_existing=True,
                )
            except Exception as e:
                logger.warning(f"[Sports] 创建播报任务失败 ({job_id}): {e}")
                continue
            count += 1
            logger.info(f"[Sports] 已安排播报: {match.home_team} vs {match.away_team}")

        logger.info(
            f"[Sports] 本次共安排 {count} 条播报（足球 {len(soccer_matches)}，NFL {len(nfl_matches)}）"
        )
        return count

    async def announce(self, channel_id: int, match: Match) -> None:
        """任务触发：频道无法解析时静默跳过"""
        message = render_announcement(match, self._tz)
        if await self._notifier.send_to_channel(channel_id, message):
            logger.info(
                f"[Sports] 已发送播报到群 {channel_id}: {match.home_team} vs {match.away_team}"
            )


# 全局调度器实例
announcement_scheduler = AnnouncementScheduler(
    sports_data,
    scheduler,
    GroupNotifier(),
    lead_minutes=plugin_config.sports_announce_lead_minutes,
    tz=pytz.timezone(plugin_config.sports_timezone),
)

_SCHEDULER_SETUP_DONE = False


async def _on_bot_connect(bot: Bot):
    channel_id = plugin_config.sports_announce_channel
    if channel_id is None:
        return

    logger.info(f"[Sports] Bot {bot.self_id} 已连接，开始安排比赛播报")
    try:
        await announcement_scheduler.schedule_announcements(channel_id)
    except Exception as e:
        logger.error(f"[Sports] 安排比赛播报失败: {e}")


async def _on_startup():
    if plugin_config.sports_announce_channel is None:
        logger.warning("[Sports] 未配置 SPORTS_ANNOUNCE_CHANNEL，开赛播报已禁用")
    if not plugin_config.football_api_key:
        logger.warning("[Sports] 未配置 FOOTBALL_API_KEY，足球数据请求将失败")
    if not plugin_config.american_football_api_key:
        logger.warning("[Sports] 未配置 AMERICAN_FOOTBALL_API_KEY，NFL 数据请求将失败")


def setup_scheduler() -> None:
    """注册启动检查与 bot 连接回调（幂等）"""
    global _SCHEDULER_SETUP_DONE
    if _SCHEDULER_SETUP_DONE:
        return

    driver = get_driver()
    driver.on_startup(_on_startup)
    driver.on_bot_connect(_on_bot_connect)

    _SCHEDULER_SETUP_DONE = True
