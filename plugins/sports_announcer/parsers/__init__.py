"""
上游 JSON 解析（纯函数，不做网络请求）

解析失败直接抛出 KeyError / TypeError / ValueError 等，由数据源统一捕获。
"""

from . import nfl, soccer

__all__ = ["nfl", "soccer"]
