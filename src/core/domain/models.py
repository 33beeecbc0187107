"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias explícitos mapean 1:1 los nombres JSON de la API (camelCase en
  Stream, snake_case en bot management).

Nota:
- Todos los campos de recursos son opcionales: ausente significa "no
  especificado", nunca "false"/"vacío".
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

ResultT = TypeVar("ResultT")


class ResourceLevel(str, Enum):
    """Nivel al que pertenece un identificador de ruta."""

    ZONE = "zone"
    ACCOUNT = "account"


class ResourceContainer(BaseModel):
    """Identificador externo de la zona/cuenta sobre la que se opera.

    Por qué existe:
    - La config de bot management es única por zona; la zona no viaja en el
      cuerpo, solo en la ruta.
    """

    level: ResourceLevel = Field(
        default=ResourceLevel.ZONE,
        description="Nivel del recurso (zona o cuenta).",
    )
    identifier: str = Field(
        default="",
        description="ID opaco de la zona/cuenta.",
    )


def zone_identifier(identifier: str) -> ResourceContainer:
    return ResourceContainer(level=ResourceLevel.ZONE, identifier=identifier)


def account_identifier(identifier: str) -> ResourceContainer:
    return ResourceContainer(level=ResourceLevel.ACCOUNT, identifier=identifier)


class ResponseInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: int = 0
    message: str = ""


class ResultInfo(BaseModel):
    """Metadatos de paginación/conteo que acompañan al `result`."""

    model_config = ConfigDict(extra="ignore")

    page: int = 0
    per_page: int = 0
    total_pages: int = 0
    count: int = 0
    total_count: int = 0


class Response(BaseModel):
    """Envelope común de la API sin payload tipado."""

    model_config = ConfigDict(extra="ignore")

    success: bool = Field(
        default=False,
        description="Flag de éxito reportado por la API.",
    )
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)


class APIResponse(Response, Generic[ResultT]):
    """Envelope con `result` tipado (`APIResponse[StreamVideo]`, etc.)."""

    result: ResultT = Field(
        ...,
        description="Payload de la operación.",
    )
    result_info: ResultInfo = Field(
        default_factory=ResultInfo,
        description="Paginación/conteos (vacío si la API no lo envía).",
    )

    @field_validator("result_info", mode="before")
    @classmethod
    def null_result_info_as_empty(cls, value: Any) -> Any:
        return ResultInfo() if value is None else value


class BotManagement(BaseModel):
    """Configuración de bot management de una zona.

    Por qué todo opcional:
    - Distingue "la API no lo devolvió" de un `False` explícito.
    """

    model_config = ConfigDict(extra="ignore")

    enable_js: bool | None = Field(
        default=None,
        description="Inyecta el JS challenge de detección.",
    )
    fight_mode: bool | None = Field(
        default=None,
        description="Bot Fight Mode.",
    )
    sbfm_definitely_automated: str | None = Field(
        default=None,
        description="Acción para tráfico 'definitely automated' (Super Bot Fight Mode).",
    )
    sbfm_likely_automated: str | None = Field(
        default=None,
        description="Acción para tráfico 'likely automated'.",
    )
    sbfm_verified_bots: str | None = Field(
        default=None,
        description="Acción para bots verificados.",
    )
    sbfm_static_resource_protection: bool | None = None
    optimize_wordpress: bool | None = None
    suppress_session_score: bool | None = Field(
        default=None,
        description="Suprime la puntuación de sesión.",
    )
    auto_update_model: bool | None = Field(
        default=None,
        description="Actualiza automáticamente el modelo de detección.",
    )
    using_latest_model: bool | None = Field(
        default=None,
        description="Solo lectura: la zona usa el último modelo.",
    )


class WatermarkPosition(str, Enum):
    UPPER_RIGHT = "upperRight"
    UPPER_LEFT = "upperLeft"
    LOWER_LEFT = "lowerLeft"
    LOWER_RIGHT = "lowerRight"
    CENTER = "center"


class StreamVideoWatermark(BaseModel):
    """Perfil de marca de agua (imagen superpuesta al vídeo)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    uid: str | None = None
    size: int | None = Field(
        default=None,
        description="Tamaño de la imagen en bytes.",
    )
    height: int | None = None
    width: int | None = None
    created: datetime | None = None
    downloaded_from: str | None = Field(
        default=None,
        alias="downloadedFrom",
        description="URL de origen de la imagen.",
    )
    name: str | None = None
    opacity: float | None = Field(
        default=None,
        description="Opacidad (0..1).",
    )
    padding: float | None = Field(
        default=None,
        description="Margen relativo al borde (0..1).",
    )
    scale: float | None = Field(
        default=None,
        description="Escala relativa al vídeo (0..1).",
    )
    position: WatermarkPosition | None = None


class StreamVideoInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    height: int | None = None
    width: int | None = None


class StreamVideoPlayback(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hls: str | None = None
    dash: str | None = None


class StreamVideoStatus(BaseModel):
    """Estado de procesamiento del vídeo."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    state: str | None = Field(
        default=None,
        description="pendingupload, downloading, queued, inprogress, ready, error.",
    )
    pct_complete: str | None = Field(default=None, alias="pctComplete")
    error_reason_code: str | None = Field(default=None, alias="errorReasonCode")
    error_reason_text: str | None = Field(default=None, alias="errorReasonText")


class StreamVideoNFT(BaseModel):
    """Asociación del vídeo a un NFT (contrato ERC-721 + token)."""

    model_config = ConfigDict(extra="ignore")

    contract: str | None = None
    token: int | None = None


class StreamVideo(BaseModel):
    """Recurso de vídeo de Stream.

    Por qué `meta` es un dict libre:
    - La API no impone esquema sobre los metadatos del usuario.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    uid: str | None = Field(
        default=None,
        description="Identificador del vídeo.",
    )
    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    created: datetime | None = None
    modified: datetime | None = None
    uploaded: datetime | None = None
    upload_expiry: datetime | None = Field(default=None, alias="uploadExpiry")
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")
    duration: float | None = Field(
        default=None,
        description="Duración en segundos (-1 si aún se desconoce).",
    )
    input: StreamVideoInput | None = None
    max_duration_seconds: int | None = Field(default=None, alias="maxDurationSeconds")
    meta: dict[str, Any] = Field(
        default_factory=dict,
        description="Metadatos arbitrarios del usuario.",
    )
    playback: StreamVideoPlayback | None = None
    preview: str | None = None
    ready_to_stream: bool | None = Field(default=None, alias="readyToStream")
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    size: int | None = None
    status: StreamVideoStatus | None = None
    thumbnail: str | None = None
    thumbnail_timestamp_pct: float | None = Field(default=None, alias="thumbnailTimestampPct")
    creator: str | None = None
    live_input: str | None = Field(default=None, alias="liveInput")
    watermark: StreamVideoWatermark | None = None
    nft: StreamVideoNFT | None = None

    @field_validator("meta", mode="before")
    @classmethod
    def null_meta_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class StreamVideoCreate(BaseModel):
    """Resultado de crear una URL de subida directa."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    upload_url: str | None = Field(default=None, alias="uploadURL")
    uid: str | None = None
    watermark: StreamVideoWatermark | None = None
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")


class StreamSignedURLResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str = Field(..., min_length=1)
