"""Validación de parámetros previa a cualquier I/O.

Reglas:
- Orden fijo de fuera hacia dentro: cuenta/zona -> vídeo -> campo propio de
  la operación (URL, ruta de fichero, duración máxima).
- Se lanza la primera regla violada; no se acumulan errores.
"""

from __future__ import annotations

from core.domain.errors import (
    MissingAccountIDError,
    MissingFilePathError,
    MissingMaxDurationError,
    MissingParameterError,
    MissingUploadURLError,
    MissingVideoIDError,
    MissingZoneIDError,
)
from core.domain.models import ResourceContainer
from core.domain.params import (
    StreamCreateVideoParameters,
    StreamUploadFileParameters,
    StreamUploadFromURLParameters,
)


def _require(value: object, error: type[MissingParameterError]) -> None:
    if not value:
        raise error()


def validate_zone(rc: ResourceContainer | None) -> None:
    _require(rc.identifier if rc is not None else "", MissingZoneIDError)


def validate_account(params: object) -> None:
    """Sirve para cualquier struct con `account_id` (listado incluido)."""

    _require(getattr(params, "account_id", ""), MissingAccountIDError)


def validate_video(params: object) -> None:
    validate_account(params)
    _require(getattr(params, "video_id", ""), MissingVideoIDError)


def validate_upload_from_url(params: StreamUploadFromURLParameters) -> None:
    validate_account(params)
    _require(params.url, MissingUploadURLError)


def validate_upload_file(params: StreamUploadFileParameters) -> None:
    validate_account(params)
    _require(params.file_path, MissingFilePathError)


def validate_create_video(params: StreamCreateVideoParameters) -> None:
    validate_account(params)
    _require(params.max_duration_seconds, MissingMaxDurationError)
