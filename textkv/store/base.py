from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Generic, TypeVar

from ..errors import FileOpenError, StoreError
from ..metrics import (
    entries_loaded_total,
    entries_persisted_total,
    load_failures_total,
    load_ms,
    persist_ms,
)
from .lines import decode_line, format_line, parse_line, validate_key

V = TypeVar("V")

logger = logging.getLogger(__name__)

_MISSING = object()


class BaseStore(Generic[V]):
    """In-memory mapping with line-oriented text persistence.

    Subclasses decide how a value is tagged and encoded on ``persist`` and how
    a tagged line is decoded on ``load``. Not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._data: dict[str, V] = {}

    # Hooks -------------------------------------------------------------------

    def _accept(self, value: V) -> V:
        return value

    def _tag_for(self, value: V) -> str:
        raise NotImplementedError

    def _encode(self, value: V) -> str:
        raise NotImplementedError

    def _decode_entry(self, key: str, type_tag: str, text: str) -> V:
        raise NotImplementedError

    def parse_value(self, text: str) -> V:
        """Turn user-typed text into a value of this store's kind."""
        raise NotImplementedError

    def format_value(self, value: V) -> str:
        return self._encode(value)

    # Mapping operations -----------------------------------------------------

    def set(self, key: str, value: V) -> None:
        self._data[validate_key(key)] = self._accept(value)

    def get(self, key: str) -> V | None:
        return self._data.get(key)

    def remove(self, key: str) -> bool:
        return self._data.pop(key, _MISSING) is not _MISSING

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    # Persistence ------------------------------------------------------------

    def persist(self, path: str | os.PathLike[str], *, atomic: bool = False) -> None:
        """Write every entry to ``path``, replacing its contents.

        With ``atomic`` the lines go to ``<path>.tmp`` first, which then
        replaces ``path``; otherwise a crash mid-write leaves a partial file.
        """

        path = Path(path)
        with persist_ms.time():
            lines = [
                format_line(key, self._tag_for(value), self._encode(value))
                for key, value in self._data.items()
            ]
            target = path.with_name(path.name + ".tmp") if atomic else path
            try:
                out = target.open("w", encoding="utf-8", newline="\n")
            except OSError as exc:
                raise FileOpenError(f"Error opening file for writing: {path}", str(path)) from exc
            with out:
                out.writelines(lines)
            if atomic:
                try:
                    target.replace(path)
                except OSError as exc:
                    target.unlink(missing_ok=True)
                    raise FileOpenError(
                        f"Error opening file for writing: {path}", str(path)
                    ) from exc

        entries_persisted_total.inc(len(lines))
        logger.debug(
            "persist",
            extra={"event_type": "persist", "path": str(path), "entries": len(lines)},
        )

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read entries from ``path`` into the store.

        Keys in the file overwrite existing ones, other keys are left alone.
        The first bad line aborts the load; entries installed from earlier
        lines stay in place.
        """

        path = Path(path)
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise FileOpenError(f"Could not open file: {path}", str(path)) from exc

        loaded = 0
        with handle, load_ms.time():
            # Binary lines split on "\n" only, so a "\r" inside a value survives.
            for line_no, raw in enumerate(handle, start=1):
                raw = raw.removesuffix(b"\n")
                try:
                    key, type_tag, text = parse_line(decode_line(raw, line_no), line_no)
                    value = self._decode_entry(key, type_tag, text)
                except StoreError as exc:
                    load_failures_total.inc()
                    logger.warning(
                        "load_failed",
                        extra={
                            "event_type": "load_failed",
                            "path": str(path),
                            "line_no": line_no,
                            "error": str(exc),
                        },
                    )
                    raise
                self._data[key] = value
                entries_loaded_total.inc()
                loaded += 1

        logger.debug("load", extra={"event_type": "load", "path": str(path), "entries": loaded})

