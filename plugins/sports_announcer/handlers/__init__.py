"""
体育播报命令处理器集合
"""

from . import commands

__all__ = ["commands"]
