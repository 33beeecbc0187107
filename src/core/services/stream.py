"""Operaciones de Stream (vídeos por cuenta).

Por qué una clase con transporte inyectado:
- El servicio no guarda estado entre llamadas; el transporte es el único
  colaborador y se puede sustituir por un fake en tests.
- Ninguna operación reintenta: la cancelación (`asyncio.CancelledError`) y
  los errores del transporte llegan al caller sin tocar.
"""

from __future__ import annotations

import logging

from core.domain.models import (
    ResultInfo,
    StreamSignedURLResult,
    StreamVideo,
    StreamVideoCreate,
)
from core.domain.params import (
    StreamCreateVideoParameters,
    StreamListParameters,
    StreamParameters,
    StreamSignedURLParameters,
    StreamUploadFileParameters,
    StreamUploadFromURLParameters,
    StreamVideoNFTParameters,
)
from core.interfaces.transport import Transport
from core.services import request_builder as builder
from core.services.request_builder import APIRequest
from core.services.response_decoder import decode_response, decode_text
from core.validation import (
    validate_account,
    validate_create_video,
    validate_upload_file,
    validate_upload_from_url,
    validate_video,
)

logger = logging.getLogger(__name__)


class StreamService:
    """Fachada de `/accounts/{account}/stream`."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def _send(self, request: APIRequest) -> bytes:
        logger.debug("stream_request", extra={"method": request.method, "path": request.path})
        return await self._transport.request(
            request.method,
            request.path,
            json=request.json,
            params=request.params,
            headers=request.headers,
            files=request.files,
            data=request.data,
        )

    async def upload_from_url(self, params: StreamUploadFromURLParameters) -> StreamVideo:
        """Pide a Stream que copie un vídeo desde una URL pública."""

        validate_upload_from_url(params)
        raw = await self._send(builder.build_upload_from_url(params))
        return decode_response(raw, StreamVideo).result

    async def upload_video_file(self, params: StreamUploadFileParameters) -> StreamVideo:
        """Sube un fichero local como multipart (parte `file`)."""

        validate_upload_file(params)
        with builder.open_upload_video_file(params) as request:
            raw = await self._send(request)
        return decode_response(raw, StreamVideo).result

    async def create_video_direct_url(self, params: StreamCreateVideoParameters) -> StreamVideoCreate:
        """Crea una URL de subida directa (para que un tercero suba el vídeo)."""

        validate_create_video(params)
        raw = await self._send(builder.build_create_video_direct_url(params))
        return decode_response(raw, StreamVideoCreate).result

    async def list_videos(self, params: StreamListParameters) -> tuple[list[StreamVideo], ResultInfo]:
        validate_account(params)
        raw = await self._send(builder.build_list_videos(params))
        envelope = decode_response(raw, list[StreamVideo] | None)
        return envelope.result or [], envelope.result_info

    async def get_video(self, params: StreamParameters) -> StreamVideo:
        validate_video(params)
        raw = await self._send(builder.build_get_video(params))
        return decode_response(raw, StreamVideo).result

    async def delete_video(self, params: StreamParameters) -> None:
        validate_video(params)
        raw = await self._send(builder.build_delete_video(params))
        decode_response(raw)

    async def embed_html(self, params: StreamParameters) -> str:
        """Devuelve el HTML de embed tal cual lo sirve la API (no es JSON)."""

        validate_video(params)
        raw = await self._send(builder.build_embed_html(params))
        return decode_text(raw)

    async def associate_nft(self, params: StreamVideoNFTParameters) -> StreamVideo:
        validate_video(params)
        raw = await self._send(builder.build_associate_nft(params))
        return decode_response(raw, StreamVideo).result

    async def create_signed_url(self, params: StreamSignedURLParameters) -> str:
        """Genera un token firmado para reproducir un vídeo con `requireSignedURLs`."""

        validate_video(params)
        raw = await self._send(builder.build_create_signed_url(params))
        return decode_response(raw, StreamSignedURLResult).result.token
