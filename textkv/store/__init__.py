from __future__ import annotations

from typing import Any

from ..codec import resolve_codec
from .base import BaseStore
from .lines import format_line, parse_line, validate_key
from .scalar import ScalarStore
from .typed import Store

__all__ = [
    "BaseStore",
    "ScalarStore",
    "Store",
    "format_line",
    "make_store",
    "parse_line",
    "validate_key",
]


def make_store(
    kind: str = "scalar", element: str = "string", *, strict_maps: bool = False
) -> BaseStore[Any]:
    """Return an empty store for ``kind`` values (see ``resolve_codec``)."""

    if kind == "scalar":
        return ScalarStore()
    return Store(resolve_codec(kind, element, strict_maps=strict_maps))
