from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from .config import Settings
from .errors import StoreError
from .logging import configure_logging
from .shell import Shell
from .store import BaseStore, make_store

app = typer.Typer(help="Typed key-value store backed by a text file")


@app.callback()
def main(
    ctx: typer.Context,
    file: Path | None = typer.Option(None, "--file", "-f", help="Store file to read and write"),
    kind: str | None = typer.Option(
        None, help="Value kind: scalar, string, int, float, list, map or value"
    ),
    element: str | None = typer.Option(None, help="Element kind for list and map stores"),
    strict_maps: bool | None = typer.Option(
        None, "--strict-maps/--lenient-maps", help="Reject map entries without ':'"
    ),
    atomic: bool | None = typer.Option(
        None, "--atomic/--no-atomic", help="Replace the store file atomically on save"
    ),
    verbose: bool = typer.Option(False, help="Print effective settings"),
) -> None:
    """Load settings, apply CLI overrides and configure logging."""
    configure_logging()
    overrides: dict[str, object] = {}
    if file is not None:
        overrides["store_path"] = file
    if kind is not None:
        overrides["value_kind"] = kind
    if element is not None:
        overrides["element_kind"] = element
    if strict_maps is not None:
        overrides["strict_maps"] = strict_maps
    if atomic is not None:
        overrides["atomic_writes"] = atomic
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if verbose:
        typer.echo(settings.model_dump_json(indent=2))
    ctx.obj = settings


def _fail(exc: StoreError) -> typer.Exit:
    typer.echo(str(exc), err=True)
    return typer.Exit(code=1)


def _open(settings: Settings) -> BaseStore[Any]:
    store = make_store(
        settings.value_kind, settings.element_kind, strict_maps=settings.strict_maps
    )
    if settings.store_path.exists():
        try:
            store.load(settings.store_path)
        except StoreError as exc:
            raise _fail(exc) from exc
    return store


def _save(store: BaseStore[Any], settings: Settings) -> None:
    try:
        store.persist(settings.store_path, atomic=settings.atomic_writes)
    except StoreError as exc:
        raise _fail(exc) from exc


@app.command()
def get(ctx: typer.Context, key: str) -> None:
    """Print the value stored under KEY."""
    store = _open(ctx.obj)
    value = store.get(key)
    if value is None:
        typer.echo("(not found)")
        raise typer.Exit(code=1)
    typer.echo(store.format_value(value))


@app.command("set")
def set_(ctx: typer.Context, key: str, value: str) -> None:
    """Store VALUE under KEY and save the file."""
    store = _open(ctx.obj)
    try:
        store.set(key, store.parse_value(value))
    except StoreError as exc:
        raise _fail(exc) from exc
    _save(store, ctx.obj)
    typer.echo("OK")


@app.command()
def remove(ctx: typer.Context, key: str) -> None:
    """Delete KEY and save the file."""
    store = _open(ctx.obj)
    if not store.remove(key):
        typer.echo("(not found)")
        return
    _save(store, ctx.obj)
    typer.echo("Removed")


@app.command()
def has(ctx: typer.Context, key: str) -> None:
    """Print whether KEY is present."""
    typer.echo("true" if _open(ctx.obj).has(key) else "false")


@app.command()
def keys(ctx: typer.Context) -> None:
    """List every key, one per line."""
    for key in _open(ctx.obj).keys():
        typer.echo(key)


@app.command()
def repl(ctx: typer.Context) -> None:
    """Read commands from stdin until 'exit'."""
    settings: Settings = ctx.obj
    store = _open(settings)
    shell = Shell(store, path=settings.store_path, atomic=settings.atomic_writes)
    shell.run(sys.stdin, prompt=sys.stdin.isatty())


if __name__ == "__main__":  # pragma: no cover
    app()
