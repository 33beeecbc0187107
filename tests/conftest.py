"""Configuración de pytest: fixtures JSON y transporte falso."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping

import pytest

# Permite correr los tests sin `pip install -e .`
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tests.fixtures import SINGLE_STREAM_RESPONSE  # noqa: E402


class RecordingTransport:
    """Transporte falso: registra cada llamada y devuelve un cuerpo fijo."""

    def __init__(self, body: bytes = b"") -> None:
        self.body = body
        self.calls: list[dict[str, Any]] = []

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
        self.calls.append(
            {
                "method": method,
                "path": path,
                "json": json,
                "params": params,
                "headers": dict(headers or {}),
                "files": files,
                "data": data,
            }
        )
        return self.body


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport(SINGLE_STREAM_RESPONSE.encode())
