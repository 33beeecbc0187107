"""CLI principal (Typer).

Por qué una CLI fina:
- Toda la lógica vive en `core.services`; aquí solo se parsean flags, se
  llama a la operación y se pinta el resultado con Rich.
- Los errores de la librería se muestran en rojo y salen con código 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.edge_client import EdgeClient
from cli import doctor
from cli.ui_components import build_bot_management_panel, build_videos_table, print_model
from core.config import AppSettings
from core.domain.errors import EdgeKitError
from core.domain.models import zone_identifier
from core.domain.params import (
    StreamCreateVideoParameters,
    StreamListParameters,
    StreamParameters,
    StreamSignedURLParameters,
    StreamUploadFileParameters,
    StreamUploadFromURLParameters,
    StreamVideoNFTParameters,
    UpdateBotManagementParams,
)

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Cloudflare bot management & Stream API client.")
bot_app = typer.Typer(no_args_is_help=True, help="Bot management config (per zone).")
stream_app = typer.Typer(no_args_is_help=True, help="Stream videos (per account).")
app.add_typer(bot_app, name="bot")
app.add_typer(stream_app, name="stream")
app.add_typer(doctor.app, name="doctor")

_console = Console()

def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _call(ctx: typer.Context, operation: Callable[[EdgeClient], Awaitable[T]]) -> T:
    """Ejecuta la operación con el `EdgeClient` que fabrica `ctx.obj`."""

    client_factory: Callable[[], EdgeClient] = ctx.obj

    async def _go() -> T:
        async with client_factory() as api:
            return await operation(api)

    try:
        return asyncio.run(_go())
    except (EdgeKitError, httpx.HTTPError) as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _meta(name: str | None) -> dict[str, Any] | None:
    return {"name": name} if name else None


def _explicit(**values: Any) -> dict[str, Any]:
    """Descarta flags no pasados para que sigan "no fijados" en el modelo."""

    return {k: v for k, v in values.items() if v is not None}


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
) -> None:
    _configure_logging(log_level or AppSettings().log_level)
    if ctx.obj is None:
        ctx.obj = EdgeClient


# --- bot ----------------------------------------------------------------------


@bot_app.command("get")
def bot_get(ctx: typer.Context, zone: str = typer.Option(..., "--zone", "-z", help="Zone ID.")) -> None:
    """Muestra la config de bot management de la zona."""

    config, _ = _call(ctx, lambda api: api.bot_management.get_bot_management(zone_identifier(zone)))
    _console.print(build_bot_management_panel(config, zone))


@bot_app.command("update")
def bot_update(
    ctx: typer.Context,
    zone: str = typer.Option(..., "--zone", "-z", help="Zone ID."),
    enable_js: bool | None = typer.Option(None, "--enable-js/--no-enable-js"),
    fight_mode: bool | None = typer.Option(None, "--fight-mode/--no-fight-mode"),
    sbfm_definitely_automated: str | None = typer.Option(None, "--sbfm-definitely-automated"),
    sbfm_likely_automated: str | None = typer.Option(None, "--sbfm-likely-automated"),
    sbfm_verified_bots: str | None = typer.Option(None, "--sbfm-verified-bots"),
    sbfm_static_resource_protection: bool | None = typer.Option(
        None, "--sbfm-static-resource-protection/--no-sbfm-static-resource-protection"
    ),
    optimize_wordpress: bool | None = typer.Option(None, "--optimize-wordpress/--no-optimize-wordpress"),
    suppress_session_score: bool | None = typer.Option(
        None, "--suppress-session-score/--no-suppress-session-score"
    ),
    auto_update_model: bool | None = typer.Option(None, "--auto-update-model/--no-auto-update-model"),
) -> None:
    """Actualiza solo los toggles pasados por flag."""

    params = UpdateBotManagementParams(
        **_explicit(
            enable_js=enable_js,
            fight_mode=fight_mode,
            sbfm_definitely_automated=sbfm_definitely_automated,
            sbfm_likely_automated=sbfm_likely_automated,
            sbfm_verified_bots=sbfm_verified_bots,
            sbfm_static_resource_protection=sbfm_static_resource_protection,
            optimize_wordpress=optimize_wordpress,
            suppress_session_score=suppress_session_score,
            auto_update_model=auto_update_model,
        )
    )
    config = _call(ctx, lambda api: api.bot_management.update_bot_management(zone_identifier(zone), params))
    _console.print(build_bot_management_panel(config, zone))


# --- stream -------------------------------------------------------------------

_ACCOUNT = typer.Option(..., "--account", "-a", help="Account ID.")
_VIDEO = typer.Option(..., "--video", "-v", help="Video UID.")


@stream_app.command("list")
def stream_list(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    search: str | None = typer.Option(None, "--search"),
    creator: str | None = typer.Option(None, "--creator"),
    status: str | None = typer.Option(None, "--status", help="Estado (p.ej. ready)."),
    limit: int | None = typer.Option(None, "--limit", min=1),
    asc: bool | None = typer.Option(None, "--asc/--desc"),
    as_json: bool = typer.Option(False, "--json", help="Salida JSON en vez de tabla."),
) -> None:
    params = StreamListParameters(
        account_id=account,
        **_explicit(search=search, creator=creator, status=status, limit=limit, asc=asc),
    )
    videos, result_info = _call(ctx, lambda api: api.stream.list_videos(params))
    if as_json:
        payload = [v.model_dump(mode="json", by_alias=True, exclude_none=True) for v in videos]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    _console.print(build_videos_table(videos, result_info))


@stream_app.command("get")
def stream_get(ctx: typer.Context, account: str = _ACCOUNT, video: str = _VIDEO) -> None:
    result = _call(ctx, lambda api: api.stream.get_video(StreamParameters(account_id=account, video_id=video)))
    print_model(_console, result)


@stream_app.command("delete")
def stream_delete(ctx: typer.Context, account: str = _ACCOUNT, video: str = _VIDEO) -> None:
    _call(ctx, lambda api: api.stream.delete_video(StreamParameters(account_id=account, video_id=video)))
    _console.print(f"[green]Deleted[/green] {video}")


@stream_app.command("embed")
def stream_embed(ctx: typer.Context, account: str = _ACCOUNT, video: str = _VIDEO) -> None:
    html = _call(ctx, lambda api: api.stream.embed_html(StreamParameters(account_id=account, video_id=video)))
    typer.echo(html)


@stream_app.command("sign")
def stream_sign(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    video: str = _VIDEO,
    exp: int | None = typer.Option(None, "--exp", help="Expiración (epoch)."),
    downloadable: bool | None = typer.Option(None, "--downloadable/--no-downloadable"),
) -> None:
    params = StreamSignedURLParameters(
        account_id=account,
        video_id=video,
        **_explicit(exp=exp, downloadable=downloadable),
    )
    typer.echo(_call(ctx, lambda api: api.stream.create_signed_url(params)))


@stream_app.command("upload")
def stream_upload(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    file: Path = typer.Option(..., "--file", "-f", help="Fichero local a subir."),
    creator: str | None = typer.Option(None, "--creator"),
) -> None:
    params = StreamUploadFileParameters(account_id=account, file_path=str(file), **_explicit(creator=creator))
    print_model(_console, _call(ctx, lambda api: api.stream.upload_video_file(params)))


@stream_app.command("copy")
def stream_copy(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    url: str = typer.Option(..., "--url", help="URL pública del vídeo."),
    name: str | None = typer.Option(None, "--name", help="meta.name"),
    creator: str | None = typer.Option(None, "--creator"),
) -> None:
    params = StreamUploadFromURLParameters(
        account_id=account,
        url=url,
        **_explicit(meta=_meta(name), creator=creator),
    )
    print_model(_console, _call(ctx, lambda api: api.stream.upload_from_url(params)))


@stream_app.command("direct-upload")
def stream_direct_upload(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    max_duration: int = typer.Option(..., "--max-duration", min=1, help="Segundos."),
    name: str | None = typer.Option(None, "--name", help="meta.name"),
) -> None:
    params = StreamCreateVideoParameters(
        account_id=account,
        max_duration_seconds=max_duration,
        **_explicit(meta=_meta(name)),
    )
    print_model(_console, _call(ctx, lambda api: api.stream.create_video_direct_url(params)))


@stream_app.command("nft")
def stream_nft(
    ctx: typer.Context,
    account: str = _ACCOUNT,
    video: str = _VIDEO,
    contract: str = typer.Option(..., "--contract"),
    token: int = typer.Option(..., "--token"),
) -> None:
    params = StreamVideoNFTParameters(account_id=account, video_id=video, contract=contract, token=token)
    print_model(_console, _call(ctx, lambda api: api.stream.associate_nft(params)))


def run() -> None:
    app()
