"""Line-based command loop over a store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import typer

from .errors import StoreError
from .store import BaseStore

logger = logging.getLogger(__name__)

Command = Callable[[str], bool | None]

HELP = """Commands:
  set <key> <value>
  get <key>
  remove <key>
  has <key>
  keys
  save [filename]
  load [filename]
  clear
  help
  exit"""


class CommandDispatcher:
    """Map command names to handlers.

    :meth:`on` works as a decorator or as a direct call. A handler receives
    the rest of the line and returns ``False`` to stop the loop.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Command] = {}

    def on(self, name: str, handler: Command | None = None) -> Any:
        if handler is not None:
            self._handlers[name] = handler
            return handler

        def decorator(func: Command) -> Command:
            self._handlers[name] = func
            return func

        return decorator

    def get(self, name: str) -> Command | None:
        return self._handlers.get(name)


def _echo_err(message: str) -> None:
    typer.echo(message, err=True)


class Shell:
    """Interactive front end: parses commands, prints results."""

    def __init__(
        self, store: BaseStore[Any], *, path: Path | None = None, atomic: bool = False
    ) -> None:
        self.store = store
        self.path = path
        self.atomic = atomic
        self.commands = CommandDispatcher()
        for name, handler in (
            ("set", self._set),
            ("get", self._get),
            ("remove", self._remove),
            ("has", self._has),
            ("keys", self._keys),
            ("save", self._save),
            ("load", self._load),
            ("clear", self._clear),
            ("help", self._help),
            ("exit", self._exit),
            ("quit", self._exit),
        ):
            self.commands.on(name, handler)

    def run(self, lines: Iterable[str], *, prompt: bool = True) -> None:
        typer.echo(HELP)
        if prompt:
            typer.echo("> ", nl=False)
        for line in lines:
            if not self.handle(line):
                break
            if prompt:
                typer.echo("> ", nl=False)

    def handle(self, line: str) -> bool:
        """Execute one command line; return ``False`` when the loop should stop."""

        name, _, rest = line.strip().partition(" ")
        if not name:
            return True
        handler = self.commands.get(name)
        if handler is None:
            typer.echo("Unknown command. Type 'help'.")
            return True
        try:
            return handler(rest.strip()) is not False
        except StoreError as exc:
            logger.info("command_failed", extra={"event_type": name, "error": str(exc)})
            _echo_err(str(exc))
            return True

    # Commands ---------------------------------------------------------------

    def _set(self, args: str) -> None:
        key, _, value = args.partition(" ")
        value = value.strip()
        if not key or not value:
            _echo_err("set requires <key> and <value>")
            return
        self.store.set(key, self.store.parse_value(value))
        typer.echo("OK")

    def _get(self, key: str) -> None:
        if not key:
            _echo_err("get requires <key>")
            return
        value = self.store.get(key)
        typer.echo("(not found)" if value is None else self.store.format_value(value))

    def _remove(self, key: str) -> None:
        if not key:
            _echo_err("remove requires <key>")
            return
        typer.echo("Removed" if self.store.remove(key) else "(not found)")

    def _has(self, key: str) -> None:
        if not key:
            _echo_err("has requires <key>")
            return
        typer.echo("true" if self.store.has(key) else "false")

    def _keys(self, _: str) -> None:
        typer.echo(" ".join(self.store.keys()))

    def _target(self, args: str, command: str) -> Path | None:
        if args:
            return Path(args)
        if self.path is None:
            _echo_err(f"{command} requires <filename>")
        return self.path

    def _save(self, args: str) -> None:
        path = self._target(args, "save")
        if path is not None:
            self.store.persist(path, atomic=self.atomic)
            typer.echo(f"Saved to {path}")

    def _load(self, args: str) -> None:
        path = self._target(args, "load")
        if path is not None:
            self.store.load(path)
            typer.echo(f"Loaded {path}")

    def _clear(self, _: str) -> None:
        self.store.clear()
        typer.echo("OK")

    def _help(self, _: str) -> None:
        typer.echo(HELP)

    def _exit(self, _: str) -> bool:
        return False
