"""Values whose shape is recovered from surface syntax alone.

A tagged value is a string scalar, a list of strings or a string-to-string
map. No kind marker is written; decoding looks at the first character:

* ``"`` or ``'``: quoted string, the same quote must close it
* ``[``: list, must end with ``]``
* ``{``: map, must end with ``}``
* anything else: bare string
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import MismatchedBrackets, MismatchedQuotes
from .base import trim
from .collections import ListCodec, MapCodec

QUOTES = "\"'"
CLOSING = {"[": "]", "{": "}"}


@dataclass
class Scalar:
    text: str


@dataclass
class StrList:
    items: list[str] = field(default_factory=list)


@dataclass
class StrMap:
    entries: dict[str, str] = field(default_factory=dict)


Value = Scalar | StrList | StrMap


def _needs_quotes(text: str) -> bool:
    return bool(text) and (text[0] in QUOTES or text[0] in CLOSING or trim(text) != text)


class TaggedValueCodec:
    type_tag = "value"

    def __init__(self, *, strict_maps: bool = False) -> None:
        self._list = ListCodec()
        self._map = MapCodec(strict=strict_maps)

    def encode(self, value: Value) -> str:
        if isinstance(value, Scalar):
            # Strings that would read back as another shape get quoted.
            return f'"{value.text}"' if _needs_quotes(value.text) else value.text
        if isinstance(value, StrList):
            return self._list.encode(value.items)
        if isinstance(value, StrMap):
            return self._map.encode(value.entries)
        raise TypeError(f"Unsupported value: {value!r}")

    def decode(self, text: str) -> Value:
        s = trim(text)
        if not s:
            return Scalar("")

        first = s[0]
        if first in QUOTES:
            if len(s) < 2 or s[-1] != first:
                raise MismatchedQuotes(text)
            return Scalar(s[1:-1])
        if first in CLOSING:
            if s[-1] != CLOSING[first]:
                raise MismatchedBrackets(text)
            if first == "[":
                return StrList(self._list.decode(s))
            return StrMap(self._map.decode(s))
        return Scalar(s)
