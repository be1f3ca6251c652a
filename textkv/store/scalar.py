from __future__ import annotations

from ..codec.scalar import FLOAT_RE, INT_RE, SCALAR_CODECS
from ..errors import CodecError, DeserializationError, TypeMismatch
from .base import BaseStore

ScalarValue = int | float | str


class ScalarStore(BaseStore[ScalarValue]):
    """Store mixing ``int``, ``float`` and ``str`` values.

    Each line records the kind of its own value (``int``, ``float`` or
    ``string``) and is decoded accordingly on load.
    """

    def _accept(self, value: ScalarValue) -> ScalarValue:
        self._tag_for(value)
        return value

    def _tag_for(self, value: ScalarValue) -> str:
        # bool is an int subclass but has no tag of its own
        if isinstance(value, bool):
            raise TypeError(f"Unsupported scalar: {value!r}")
        if isinstance(value, int):
            return "int"
        if isinstance(value, float):
            return "float"
        if isinstance(value, str):
            return "string"
        raise TypeError(f"Unsupported scalar: {value!r}")

    def _encode(self, value: ScalarValue) -> str:
        return SCALAR_CODECS[self._tag_for(value)].encode(value)

    def _decode_entry(self, key: str, type_tag: str, text: str) -> ScalarValue:
        codec = SCALAR_CODECS.get(type_tag)
        if codec is None:
            raise TypeMismatch(key, "|".join(SCALAR_CODECS), type_tag)
        try:
            return codec.decode(text)
        except CodecError as exc:
            raise DeserializationError(key, exc) from exc

    def parse_value(self, text: str) -> ScalarValue:
        """Infer the kind of ``text``: integer, then decimal number, then string."""

        for type_tag, pattern in (("int", INT_RE), ("float", FLOAT_RE)):
            if pattern.fullmatch(text) and any(ch.isdigit() for ch in text):
                try:
                    return SCALAR_CODECS[type_tag].decode(text)
                except CodecError:
                    break
        return text

    def get_string(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> int | None:
        value = self._data.get(key)
        return value if isinstance(value, int) else None

    def get_float(self, key: str) -> float | None:
        value = self._data.get(key)
        return value if isinstance(value, float) else None
