"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Hit the token verification endpoint; any HTTP answer means the API is reachable."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get("/user/tokens/verify")
    except httpx.HTTPError as exc:
        return False, str(exc)
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="edge-kit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_token:
        table.add_row("API token", "OK", "Authorization header enabled")
    else:
        table.add_row("API token", "MISSING", "Set EDGE_KIT_API_TOKEN or run `edge-kit doctor configure`")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:.1f}s")

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    base_url = typer.prompt(
        "API base URL",
        default=AppSettings().api_base_url,
        show_default=True,
    ).strip()
    api_token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not api_token:
        raise typer.BadParameter("base_url and api token are required")

    env_path = write_user_env_vars(
        {
            "EDGE_KIT_API_BASE_URL": base_url,
            "EDGE_KIT_API_TOKEN": api_token,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
