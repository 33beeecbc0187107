"""Operaciones de bot management (config por zona).

Cada método: validar -> construir -> una llamada al transporte -> decodificar.
"""

from __future__ import annotations

import logging

from core.domain.models import BotManagement, ResourceContainer, ResultInfo
from core.domain.params import UpdateBotManagementParams
from core.interfaces.transport import Transport
from core.services.request_builder import (
    APIRequest,
    build_get_bot_management,
    build_update_bot_management,
)
from core.services.response_decoder import decode_response
from core.validation import validate_zone

logger = logging.getLogger(__name__)


class BotManagementService:
    """Fachada de `/zones/{zone}/bot_management`."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def _send(self, request: APIRequest) -> bytes:
        logger.debug("bot_management_request", extra={"method": request.method, "path": request.path})
        return await self._transport.request(
            request.method,
            request.path,
            json=request.json,
            headers=request.headers,
        )

    async def get_bot_management(self, rc: ResourceContainer) -> tuple[BotManagement, ResultInfo]:
        """Lee la config de bot management de la zona."""

        validate_zone(rc)
        raw = await self._send(build_get_bot_management(rc))
        envelope = decode_response(raw, BotManagement)
        return envelope.result, envelope.result_info

    async def update_bot_management(
        self,
        rc: ResourceContainer,
        params: UpdateBotManagementParams,
    ) -> BotManagement:
        """Actualiza la config enviando solo los campos fijados en `params`.

        Nota:
        - Que el servidor haga merge parcial o sobrescriba es contrato de la
          API; aquí solo garantizamos que lo no fijado no se envía.
        """

        validate_zone(rc)
        raw = await self._send(build_update_bot_management(rc, params))
        return decode_response(raw, BotManagement).result
