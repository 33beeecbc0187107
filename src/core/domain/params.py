"""Parámetros de operación (structs transitorios por llamada).

Por qué modelos separados de los recursos:
- Llevan identificadores de ruta (`account_id`, `video_id`) que nunca viajan
  en el cuerpo (`Field(exclude=True)`).
- Se serializan con `exclude_unset`: solo se envía lo que el caller fijó de
  forma explícita (actualizaciones parciales).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OperationParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class UpdateBotManagementParams(OperationParams):
    """Cambios a aplicar sobre la config de bot management.

    Nota:
    - No incluye `using_latest_model` (campo de solo lectura).
    """

    enable_js: bool | None = None
    fight_mode: bool | None = None
    sbfm_definitely_automated: str | None = None
    sbfm_likely_automated: str | None = None
    sbfm_verified_bots: str | None = None
    sbfm_static_resource_protection: bool | None = None
    optimize_wordpress: bool | None = None
    suppress_session_score: bool | None = None
    auto_update_model: bool | None = None


class UploadVideoURLWatermark(OperationParams):
    uid: str | None = None


class StreamUploadFromURLParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    video_id: str = Field(default="", exclude=True)
    url: str = Field(
        default="",
        description="URL pública desde la que Stream copiará el vídeo.",
    )
    creator: str | None = None
    thumbnail_timestamp_pct: float | None = Field(default=None, alias="thumbnailTimestampPct")
    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    watermark: UploadVideoURLWatermark | None = None
    meta: dict[str, Any] | None = None
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")


class StreamUploadFileParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    video_id: str = Field(default="", exclude=True)
    file_path: str = Field(
        default="",
        exclude=True,
        description="Ruta local del fichero a subir.",
    )
    creator: str | None = None
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")


class StreamCreateVideoParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    max_duration_seconds: int = Field(
        default=0,
        ge=0,
        alias="maxDurationSeconds",
        description="Duración máxima permitida para la subida directa.",
    )
    expiry: datetime | None = None
    creator: str | None = None
    thumbnail_timestamp_pct: float | None = Field(default=None, alias="thumbnailTimestampPct")
    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    watermark: UploadVideoURLWatermark | None = None
    meta: dict[str, Any] | None = None
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")


class StreamListParameters(OperationParams):
    """Filtros del listado; se envían como query string."""

    account_id: str = Field(default="", exclude=True)
    after: datetime | None = None
    before: datetime | None = None
    creator: str | None = None
    include_counts: bool | None = None
    search: str | None = None
    limit: int | None = Field(default=None, ge=1)
    asc: bool | None = None
    status: str | None = Field(
        default=None,
        description="Filtra por estado de procesamiento (p.ej. 'ready').",
    )


class StreamParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    video_id: str = Field(default="", exclude=True)


class StreamVideoNFTParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    video_id: str = Field(default="", exclude=True)
    contract: str | None = None
    token: int | None = None


class StreamAccessRule(OperationParams):
    type: str
    country: list[str] | None = None
    action: str
    ip: list[str] | None = None


class StreamSignedURLParameters(OperationParams):
    account_id: str = Field(default="", exclude=True)
    video_id: str = Field(default="", exclude=True)
    id: str | None = Field(default=None, description="ID de la signing key.")
    pem: str | None = None
    exp: int | None = Field(default=None, description="Expiración (epoch).")
    nbf: int | None = Field(default=None, description="No válido antes de (epoch).")
    downloadable: bool | None = None
    access_rules: list[StreamAccessRule] | None = Field(default=None, alias="accessRules")
