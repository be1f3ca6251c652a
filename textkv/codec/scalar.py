"""Codecs for single string, integer and floating point values."""

from __future__ import annotations

import re

from ..errors import InvalidNumber
from .base import trim

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class StringCodec:
    type_tag = "string"

    def encode(self, value: str) -> str:
        return value

    def decode(self, text: str) -> str:
        return text


class IntCodec:
    type_tag = "int"

    def encode(self, value: int) -> str:
        return f"{value:d}"

    def decode(self, text: str) -> int:
        candidate = trim(text)
        if not INT_RE.fullmatch(candidate):
            raise InvalidNumber(text, self.type_tag)
        try:
            return int(candidate)
        except ValueError as exc:
            raise InvalidNumber(text, self.type_tag) from exc


class FloatCodec:
    type_tag = "float"

    def encode(self, value: float) -> str:
        return repr(float(value))

    def decode(self, text: str) -> float:
        candidate = trim(text)
        if not FLOAT_RE.fullmatch(candidate):
            raise InvalidNumber(text, self.type_tag)
        try:
            return float(candidate)
        except ValueError as exc:
            raise InvalidNumber(text, self.type_tag) from exc


SCALAR_CODECS: dict[str, StringCodec | IntCodec | FloatCodec] = {
    codec.type_tag: codec for codec in (StringCodec(), IntCodec(), FloatCodec())
}
