"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que los servicios sean testeables con un transporte falso sin
  acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo para ejecutar una petición contra la API.

    Reglas de diseño:
    - `request` es asíncrono porque hace I/O (HTTP).
    - Devuelve el cuerpo crudo solo en el camino de éxito (2xx); cualquier
      otro resultado se lanza como excepción del propio transporte.
    - No reintenta: una llamada = una petición.
    """

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
        """Ejecuta la petición y devuelve el cuerpo de la respuesta."""

        ...
