"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BotManagement, ResultInfo, StreamVideo


def print_model(console: Console, model: BaseModel) -> None:
    """Imprime un modelo como JSON con los nombres de la API."""

    console.print_json(data=model.model_dump(mode="json", by_alias=True, exclude_none=True))


def build_videos_table(videos: Iterable[StreamVideo], result_info: ResultInfo | None = None) -> Table:
    title = "Stream videos"
    if result_info is not None and result_info.total_count:
        title += f" ({result_info.total_count} total)"

    table = Table(title=title)
    table.add_column("UID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("State", style="green")
    table.add_column("Duration", style="magenta", justify="right")
    table.add_column("Created", style="dim")

    for video in videos:
        name = video.meta.get("name")
        state = video.status.state if video.status else None
        table.add_row(
            video.uid or "-",
            str(name) if name is not None else "-",
            state or "-",
            f"{video.duration:.1f}s" if video.duration is not None else "-",
            video.created.isoformat() if video.created else "-",
        )
    return table


def build_bot_management_panel(config: BotManagement, zone_id: str) -> Panel:
    """Panel con los toggles de bot management (solo los presentes)."""

    body = Text()
    for key, value in config.model_dump(exclude_none=True).items():
        style = "green" if value is True else "red" if value is False else "white"
        body.append(f"{key}: ", style="bold")
        body.append(f"{value}\n", style=style)
    if not body.plain:
        body.append("(sin datos)", style="dim")

    return Panel(body, title=Text(f"Bot management • {zone_id}", style="bold yellow"), border_style="yellow")
