"""List and map codecs built on top of a scalar element codec.

Neither format escapes its delimiters: a comma inside a list element or map
entry is read back as a separator, and the first ``:`` of a map entry always
ends its key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import InvalidListFormat, InvalidMapFormat
from .base import ValueCodec, trim
from .scalar import StringCodec


@dataclass
class ListCodec:
    """Encode ordered sequences as ``[a,b,c]``."""

    element: ValueCodec[Any] = field(default_factory=StringCodec)
    type_tag: str = "list"

    def encode(self, value: list[Any]) -> str:
        return "[" + ",".join(self.element.encode(item) for item in value) + "]"

    def decode(self, text: str) -> list[Any]:
        if not text:
            return []
        if text[0] != "[" or text[-1] != "]":
            raise InvalidListFormat(text)

        pieces = text[1:-1].split(",")
        items = [self.element.decode(trim(piece)) for piece in pieces[:-1]]
        last = trim(pieces[-1])
        if last:
            items.append(self.element.decode(last))
        return items


@dataclass
class MapCodec:
    """Encode string-keyed mappings as ``{k1:v1,k2:v2}``.

    Decoding tolerates missing braces. Entries without a ``:`` are skipped
    unless ``strict`` is set, in which case they raise ``InvalidMapFormat``.
    """

    value: ValueCodec[Any] = field(default_factory=StringCodec)
    strict: bool = False
    type_tag: str = "map"

    def encode(self, value: dict[str, Any]) -> str:
        return "{" + ",".join(f"{k}:{self.value.encode(v)}" for k, v in value.items()) + "}"

    def decode(self, text: str) -> dict[str, Any]:
        body = text
        if len(text) >= 2 and text[0] == "{" and text[-1] == "}":
            body = text[1:-1]

        result: dict[str, Any] = {}
        for raw in body.split(","):
            piece = trim(raw)
            key, sep, rest = piece.partition(":")
            if not sep:
                if self.strict and piece:
                    raise InvalidMapFormat(text, piece)
                continue
            result[trim(key)] = self.value.decode(trim(rest))
        return result
