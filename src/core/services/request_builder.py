"""Construcción de peticiones (método + ruta + cuerpo + headers).

Por qué separado de los servicios:
- Es puro: dado un struct ya validado devuelve un `APIRequest`, sin I/O
  (salvo abrir el fichero local en la subida multipart).
- Los headers fijos por familia de endpoints viven aquí y no en la config,
  para que el usuario no pueda pisarlos.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from pydantic import BaseModel

from core.domain.errors import LocalFileError
from core.domain.models import ResourceContainer
from core.domain.params import (
    StreamCreateVideoParameters,
    StreamListParameters,
    StreamParameters,
    StreamSignedURLParameters,
    StreamUploadFileParameters,
    StreamUploadFromURLParameters,
    StreamVideoNFTParameters,
    UpdateBotManagementParams,
)

# La API de bot management está migrando a 2.0.0; la 1.0.0 sigue siendo la
# versión por defecto, así que hay que pedir la 2.0.0 en cada petición.
BOT_MANAGEMENT_VERSION_HEADERS: Mapping[str, str] = {"Cloudflare-Version": "2.0.0"}


@dataclass(frozen=True)
class APIRequest:
    method: str
    path: str
    json: Any | None = None
    params: Mapping[str, Any] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    files: Mapping[str, Any] | None = None
    data: Mapping[str, Any] | None = None


def serialize(params: BaseModel) -> dict[str, Any]:
    """Serializa solo los campos fijados explícitamente (y no nulos)."""

    return params.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


def _stream_path(account_id: str, video_id: str | None = None, suffix: str = "") -> str:
    path = f"/accounts/{account_id}/stream"
    if video_id:
        path += f"/{video_id}"
    if suffix:
        path += f"/{suffix}"
    return path


# --- Bot management ---------------------------------------------------------


def build_get_bot_management(rc: ResourceContainer) -> APIRequest:
    return APIRequest(
        method="GET",
        path=f"/zones/{rc.identifier}/bot_management",
        headers=dict(BOT_MANAGEMENT_VERSION_HEADERS),
    )


def build_update_bot_management(rc: ResourceContainer, params: UpdateBotManagementParams) -> APIRequest:
    return APIRequest(
        method="PUT",
        path=f"/zones/{rc.identifier}/bot_management",
        json=serialize(params),
        headers=dict(BOT_MANAGEMENT_VERSION_HEADERS),
    )


# --- Stream -----------------------------------------------------------------


def build_upload_from_url(params: StreamUploadFromURLParameters) -> APIRequest:
    return APIRequest(method="POST", path=_stream_path(params.account_id, suffix="copy"), json=serialize(params))


def build_create_video_direct_url(params: StreamCreateVideoParameters) -> APIRequest:
    return APIRequest(
        method="POST",
        path=_stream_path(params.account_id, suffix="direct_upload"),
        json=serialize(params),
    )


def build_list_videos(params: StreamListParameters) -> APIRequest:
    return APIRequest(method="GET", path=_stream_path(params.account_id), params=serialize(params) or None)


def build_get_video(params: StreamParameters) -> APIRequest:
    return APIRequest(method="GET", path=_stream_path(params.account_id, params.video_id))


def build_delete_video(params: StreamParameters) -> APIRequest:
    return APIRequest(method="DELETE", path=_stream_path(params.account_id, params.video_id))


def build_embed_html(params: StreamParameters) -> APIRequest:
    return APIRequest(
        method="GET",
        path=_stream_path(params.account_id, params.video_id, "embed"),
        headers={"Accept": "text/html"},
    )


def build_associate_nft(params: StreamVideoNFTParameters) -> APIRequest:
    return APIRequest(
        method="POST",
        path=_stream_path(params.account_id, params.video_id),
        json=serialize(params),
    )


def build_create_signed_url(params: StreamSignedURLParameters) -> APIRequest:
    return APIRequest(
        method="POST",
        path=_stream_path(params.account_id, params.video_id, "token"),
        json=serialize(params),
    )


@contextmanager
def open_upload_video_file(params: StreamUploadFileParameters) -> Iterator[APIRequest]:
    """Abre el fichero local y produce la petición multipart.

    - La parte `file` lleva el contenido; httpx lo lee en streaming.
    - Si el fichero no se puede abrir se lanza `LocalFileError` (nunca un
      error de red).
    - El handle se cierra al salir del contexto.
    """

    path = Path(params.file_path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise LocalFileError(params.file_path, exc.strerror or str(exc)) from exc

    with handle:
        yield APIRequest(
            method="POST",
            path=_stream_path(params.account_id),
            files={"file": (path.name, handle, "application/octet-stream")},
            data=serialize(params) or None,
        )
