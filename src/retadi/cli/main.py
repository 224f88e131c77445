"""ReTADI CLI - desktop shell, headless pairing server and QR helpers."""

from __future__ import annotations

import json
import threading
from pathlib import Path

import click
from pydantic import ValidationError

from retadi.utils.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_output: bool) -> None:
    """ReTADI Server - Remote Tablet Display Interface."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["json_output"] = json_output
    setup_logging(level="DEBUG" if debug else "INFO", json_output=json_output)


def _settings(**overrides):
    from retadi.config import load_settings

    try:
        return load_settings(**overrides)
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc


@cli.command()
@click.option("--port", type=int, default=None, help="Pairing server port")
@click.option("--root", "asset_root", type=click.Path(path_type=Path), default=None,
              help="Directory served to the companion device")
@click.option("--auto-start", is_flag=True, help="Start the server on launch")
@click.option("--browser", is_flag=True, help="Open in a browser tab instead of a window")
@click.option("--ui-port", type=int, default=None, help="Port of the shell's own web server")
def gui(port: int | None, asset_root: Path | None, auto_start: bool,
        browser: bool, ui_port: int | None) -> None:
    """Open the desktop shell."""
    from retadi.ui.main import run_app

    settings = _settings(
        port=port,
        asset_root=asset_root,
        auto_start=True if auto_start else None,
        native=False if browser else None,
        ui_port=ui_port,
    )
    run_app(settings)


@cli.command()
@click.option("--port", type=int, default=None, help="Pairing server port")
@click.option("--root", "asset_root", type=click.Path(path_type=Path), default=None,
              help="Directory served to the companion device")
@click.option("--no-qr", is_flag=True, help="Do not print the terminal QR code")
@click.pass_context
def serve(ctx: click.Context, port: int | None, asset_root: Path | None, no_qr: bool) -> None:
    """Run the pairing server without a window until interrupted."""
    from retadi.exceptions import RetadiError
    from retadi.pairing.encoder import render_ascii
    from retadi.pairing.server import PairingServer
    from retadi.pairing.state import SessionState

    settings = _settings(port=port, asset_root=asset_root)
    server = PairingServer(
        SessionState(port=settings.port), timeout_keep_alive=settings.timeout_keep_alive
    )
    try:
        url = server.start(settings.port, settings.asset_root)
    except RetadiError as exc:
        raise click.ClickException(str(exc)) from exc

    if ctx.obj.get("json_output"):
        click.echo(json.dumps({"url": url, "port": server.state.read().port}))
    else:
        click.echo(f"Serving {settings.asset_root} at {url}")
        if not no_qr:
            try:
                click.echo(render_ascii(url))
            except RetadiError as exc:
                click.echo(f"QR code unavailable: {exc}", err=True)
        click.echo("Press Ctrl+C to stop.")

    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()


@cli.command()
@click.argument("text")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Write a PNG instead of printing to the terminal")
@click.option("--size", type=int, default=400, show_default=True, help="PNG edge length in pixels")
def qr(text: str, output: Path | None, size: int) -> None:
    """Encode TEXT as a QR code."""
    from retadi.exceptions import EncodingError
    from retadi.pairing.encoder import encode, render_ascii

    try:
        if output is None:
            click.echo(render_ascii(text))
            return
        bitmap = encode(text, (size, size))
    except EncodingError as exc:
        raise click.ClickException(str(exc)) from exc

    output.write_bytes(bitmap.to_png())
    click.echo(f"Wrote {bitmap.width}x{bitmap.height} QR code to {output}")


@cli.command()
@click.option("--port", type=int, default=None, help="Pairing server port")
@click.pass_context
def address(ctx: click.Context, port: int | None) -> None:
    """Show the URL a companion device would connect to."""
    from retadi.pairing.resolver import resolve

    settings = _settings(port=port)
    url = resolve(settings.port)
    if ctx.obj.get("json_output"):
        click.echo(json.dumps({"url": url, "port": settings.port}))
    else:
        click.echo(url)


if __name__ == "__main__":
    cli()
