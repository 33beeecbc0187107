"""Decodificación de respuestas JSON a modelos tipados.

Contrato:
- Solo se decodifica el camino de éxito del transporte (2xx).
- JSON mal formado o con forma inesperada -> `DecodeError` con el mensaje
  fijo "unable to unmarshal response" y la causa original encadenada.
"""

from __future__ import annotations

import logging
from typing import Any, overload

from pydantic import ValidationError

from core.domain.errors import DecodeError
from core.domain.models import APIResponse, Response

logger = logging.getLogger(__name__)


@overload
def decode_response(raw: bytes, result_type: None = None) -> Response: ...


@overload
def decode_response(raw: bytes, result_type: Any) -> APIResponse[Any]: ...


def decode_response(raw: bytes, result_type: Any = None) -> Response | APIResponse[Any]:
    """Parsea el envelope; `result_type=None` ignora el payload (p.ej. DELETE)."""

    envelope_type = Response if result_type is None else APIResponse[result_type]
    try:
        return envelope_type.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "response_decode_failed",
            extra={"result_type": getattr(result_type, "__name__", str(result_type)), "error_count": exc.error_count()},
        )
        raise DecodeError(str(exc)) from exc


def decode_text(raw: bytes) -> str:
    """Devuelve el cuerpo tal cual (sin parsear JSON).

    Los bytes que no son UTF-8 válido se conservan como surrogates:
    `text.encode("utf-8", "surrogateescape")` recupera el cuerpo original.
    """

    return raw.decode("utf-8", errors="surrogateescape")
