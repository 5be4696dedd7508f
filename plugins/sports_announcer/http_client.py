"""
体育数据 HTTP 客户端（负责请求、超时、会话管理）
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from nonebot.log import logger


class SportsHttpClient:
    def __init__(
        self,
        *,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_json(
        self,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        """GET 并解析 JSON；网络错误、非 2xx、非法 JSON 均直接抛出"""
        client = self._get_client()
        logger.debug(f"[Sports] 正在请求: {url}")

        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()

        logger.debug(f"[Sports] 请求成功: {url}")
        return response.json()
