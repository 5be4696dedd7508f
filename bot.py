import logging

import nonebot
from nonebot.adapters.onebot.v11 import Adapter as ONEBOT_V11Adapter

logging.getLogger('asyncio').setLevel(logging.ERROR)


if __name__ == "__main__":
    nonebot.init()

    driver = nonebot.get_driver()
    driver.register_adapter(ONEBOT_V11Adapter)

    nonebot.load_from_toml("pyproject.toml")

    nonebot.run()
