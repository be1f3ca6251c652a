"""Text codecs for scalar, list, map and tagged values."""

from __future__ import annotations

from typing import Any

from .base import ValueCodec
from .collections import ListCodec, MapCodec
from .scalar import SCALAR_CODECS, FloatCodec, IntCodec, StringCodec
from .tagged import Scalar, StrList, StrMap, TaggedValueCodec, Value

__all__ = [
    "FloatCodec",
    "IntCodec",
    "ListCodec",
    "MapCodec",
    "Scalar",
    "StrList",
    "StrMap",
    "StringCodec",
    "TaggedValueCodec",
    "Value",
    "ValueCodec",
    "resolve_codec",
]


def resolve_codec(
    kind: str, element: str = "string", *, strict_maps: bool = False
) -> ValueCodec[Any]:
    """Build the codec for a store of ``kind`` values.

    ``element`` selects the scalar codec used for list items and map values.
    """

    if kind in SCALAR_CODECS:
        return SCALAR_CODECS[kind]
    if element not in SCALAR_CODECS:
        raise ValueError(f"Unknown element kind: {element}")
    if kind == "list":
        return ListCodec(element=SCALAR_CODECS[element])
    if kind == "map":
        return MapCodec(value=SCALAR_CODECS[element], strict=strict_maps)
    if kind == "value":
        return TaggedValueCodec(strict_maps=strict_maps)
    raise ValueError(f"Unknown value kind: {kind}")
