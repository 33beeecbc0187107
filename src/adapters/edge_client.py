"""Punto de entrada de alto nivel: transporte httpx + servicios.

Uso:

    async with EdgeClient() as api:
        video = await api.stream.get_video(StreamParameters(account_id=..., video_id=...))
"""

from __future__ import annotations

import httpx

from adapters.http_client import HttpxTransport, build_async_client
from core.config import AppSettings
from core.services.bot_management import BotManagementService
from core.services.stream import StreamService


class EdgeClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        client = build_async_client(self.settings, transport=http_transport)
        self.transport = HttpxTransport(self.settings, client=client)
        self._client = client
        self.bot_management = BotManagementService(self.transport)
        self.stream = StreamService(self.transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "EdgeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
