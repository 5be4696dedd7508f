"""
解析公共工具函数（纯函数）
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def parse_iso_datetime(value: str) -> datetime:
    """解析 ISO-8601 时间（支持末尾 Z），无时区时视为 UTC"""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_int(value: Any) -> Optional[int]:
    """比分等数值字段：None 保持 None，其余转 int"""
    if value is None:
        return None
    return int(value)


def to_id(value: Any) -> str:
    """上游 id：缺失或 null 时返回空串"""
    if value is None:
        return ""
    return str(value)
