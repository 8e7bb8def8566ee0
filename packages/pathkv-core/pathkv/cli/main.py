"""
pathkv CLI Main Entry Point

Usage:
    pathkv get <key> [--json-out]
    pathkv set <key> <value> [--json]
    pathkv remove <key>
    pathkv clear [--yes]
    pathkv keys
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

import click

from .. import __version__
from ..codec import is_structured
from ..errors import PathKVError
from ..services.config_service import load_settings
from ..services.store_factory import open_store
from ..store import PathResolvingStore


def _format_value(value: Any, as_json: bool) -> str:
    if as_json or is_structured(value):
        return json.dumps(value, indent=2, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _open_store(ctx: click.Context) -> PathResolvingStore:
    """Open the configured store for one command; closed when the command ends."""
    try:
        settings = load_settings(ctx.obj["config_path"])
    except (PathKVError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if settings.store.backend == "memory":
        click.echo(
            "Error: the memory backend does not persist between CLI calls. "
            "Configure store.backend as 'file' or 'sqlite'.",
            err=True,
        )
        sys.exit(1)

    store = open_store(settings)
    close = getattr(store.backend, "close", None)
    if close is not None:
        ctx.call_on_close(close)
    return store


@click.group()
@click.version_option(version=__version__, prog_name="pathkv")
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """pathkv - read and write structured values in a key-value store."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"config_path": config_path}


@cli.command("get")
@click.argument("key")
@click.option("--json-out", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def get_cmd(ctx: click.Context, key: str, json_output: bool):
    """Print the value at KEY (dotted paths allowed, e.g. user.tags.0)."""
    store = _open_store(ctx)
    try:
        value = store.get(key)
    except PathKVError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if value is None:
        sys.exit(1)
    click.echo(_format_value(value, json_output))


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Parse VALUE as JSON before storing")
@click.pass_context
def set_cmd(ctx: click.Context, key: str, value: str, as_json: bool):
    """Store VALUE under KEY."""
    stored: Any = value
    if as_json:
        try:
            stored = json.loads(value)
        except ValueError as e:
            click.echo(f"Error: VALUE is not valid JSON: {e}", err=True)
            sys.exit(1)

    store = _open_store(ctx)
    try:
        store.set(key, stored)
    except PathKVError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("remove")
@click.argument("key")
@click.pass_context
def remove_cmd(ctx: click.Context, key: str):
    """Delete KEY from the store."""
    store = _open_store(ctx)
    try:
        store.remove(key)
    except PathKVError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("clear")
@click.confirmation_option(prompt="Delete every entry in the store?")
@click.pass_context
def clear_cmd(ctx: click.Context):
    """Delete every entry in the store."""
    store = _open_store(ctx)
    try:
        store.clear()
    except PathKVError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo("Store cleared.")


@cli.command("keys")
@click.pass_context
def keys_cmd(ctx: click.Context):
    """List stored root keys."""
    store = _open_store(ctx)
    try:
        keys = store.backend.keys()
    except PathKVError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not keys:
        click.echo("No keys stored.")
        return
    for key in keys:
        click.echo(key)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
