from __future__ import annotations

from typing import TypeVar

from ..codec import ValueCodec
from ..errors import CodecError, DeserializationError, TypeMismatch
from .base import BaseStore

V = TypeVar("V")


class Store(BaseStore[V]):
    """Store holding values of a single kind, encoded by ``codec``.

    Every persisted line carries ``codec.type_tag``; loading a line with any
    other tag raises ``TypeMismatch``.
    """

    def __init__(self, codec: ValueCodec[V]) -> None:
        super().__init__()
        self.codec = codec

    @property
    def type_tag(self) -> str:
        return self.codec.type_tag

    def _tag_for(self, value: V) -> str:
        return self.codec.type_tag

    def _encode(self, value: V) -> str:
        return self.codec.encode(value)

    def _decode_entry(self, key: str, type_tag: str, text: str) -> V:
        if type_tag != self.codec.type_tag:
            raise TypeMismatch(key, self.codec.type_tag, type_tag)
        try:
            return self.codec.decode(text)
        except CodecError as exc:
            raise DeserializationError(key, exc) from exc

    def parse_value(self, text: str) -> V:
        return self.codec.decode(text)
