"""Taxonomía de errores de la librería.

Por qué clases y no códigos:
- Cada parámetro obligatorio tiene su propia excepción, así el caller puede
  distinguirlas con `except`/`pytest.raises` sin comparar mensajes.
- Los errores de decodificación, de fichero local y de HTTP viven en ramas
  separadas para no confundirlos entre sí.

Nota:
- Los errores de red de httpx (`httpx.HTTPError`) no se envuelven: llegan al
  caller tal cual los lanza el transporte.
"""

from __future__ import annotations

ERR_UNMARSHAL = "unable to unmarshal response"


class EdgeKitError(Exception):
    """Raíz de todos los errores propios de la librería."""


class MissingParameterError(EdgeKitError, ValueError):
    """Falta un parámetro obligatorio; se lanza antes de cualquier I/O."""

    message = "required parameter missing"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingAccountIDError(MissingParameterError):
    message = "required missing account ID"


class MissingZoneIDError(MissingParameterError):
    message = "required missing zone ID"


class MissingVideoIDError(MissingParameterError):
    message = "required video id missing"


class MissingUploadURLError(MissingParameterError):
    message = "required url missing"


class MissingFilePathError(MissingParameterError):
    message = "required file path missing"


class MissingMaxDurationError(MissingParameterError):
    message = "required max duration missing"


class DecodeError(EdgeKitError):
    """El cuerpo de la respuesta no es el JSON esperado.

    La causa original (error de pydantic) queda en `__cause__`.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"{ERR_UNMARSHAL}: {detail}")
        self.detail = detail


class LocalFileError(EdgeKitError, OSError):
    """No se pudo abrir el fichero local a subir."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"unable to open file {path!r}: {reason}")
        self.path = path


class APIRequestError(EdgeKitError):
    """La API respondió con un status HTTP fuera de 2xx."""

    def __init__(self, status_code: int, body: bytes = b"", *, method: str = "", path: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        snippet = body[:200].decode("utf-8", errors="replace")
        super().__init__(f"HTTP {status_code} for {method} {path}: {snippet}".strip())
