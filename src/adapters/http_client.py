"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers y auth para todas las operaciones.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con
  `httpx.MockTransport`.

Nota:
- Sin reintentos ni rate limiting: una llamada = una petición.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import APIRequestError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las operaciones se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `core.interfaces.transport.Transport` sobre httpx.

    - 2xx -> bytes del cuerpo.
    - Otro status -> `APIRequestError`.
    - Errores de red (`httpx.HTTPError`) se propagan sin envolver.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)
        self._owns_client = client is None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> bytes:
        response = await self._client.request(
            method,
            path,
            json=json,
            params=params,
            headers=dict(headers) if headers else None,
            files=files,
            data=data,
        )
        logger.debug(
            "http_response",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        if not response.is_success:
            logger.warning(
                "http_error_status",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise APIRequestError(response.status_code, response.content, method=method, path=path)
        return response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
