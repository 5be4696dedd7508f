"""体育播报插件

抓取足球（football-data.org）与 NFL（Sportradar）数据，
开赛前 10 分钟在指定群播报，并提供比分、积分榜、球员数据查询命令。
"""

from nonebot import get_driver, require
from nonebot.plugin import PluginMetadata
from nonebot.log import logger

require("nonebot_plugin_apscheduler")

from .config import Config
from .data_source import sports_data
from .scheduler import announcement_scheduler, setup_scheduler

# 导入 handlers 以注册命令
from . import handlers


__plugin_meta__ = PluginMetadata(
    name="体育播报",
    description="足球 / NFL 开赛播报与比分、积分榜、球员数据查询",
    usage="""命令列表：
- !ping：检查机器人是否在线
- !livescores：查看进行中比赛的实时比分
- !standings <Soccer|NFL> [联赛ID]：查看积分榜
- !playerstats <球员> <Soccer|NFL>：查看球员数据
- !sportshelp：显示帮助
""",
    type="application",
    homepage="",
    config=Config,
    supported_adapters={"~onebot.v11"},
)

driver = get_driver()

setup_scheduler()


# 清理资源
@driver.on_shutdown
async def cleanup():
    await sports_data.close()
    logger.info("[Sports] 体育播报插件已清理资源")


__all__ = ["announcement_scheduler", "sports_data"]
