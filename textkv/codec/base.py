from __future__ import annotations

from typing import Protocol, TypeVar

V = TypeVar("V")

# Characters stripped around list items, map keys/values and tagged values.
WHITESPACE = " \t\n\r"


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


class ValueCodec(Protocol[V]):
    """Pair of functions defining a value kind's textual representation.

    ``type_tag`` is the short name written between ``:`` and ``=`` in the
    persisted line and checked again on load.
    """

    type_tag: str

    def encode(self, value: V) -> str:  # noqa: D401
        """Return the textual form of ``value``."""

    def decode(self, text: str) -> V:  # noqa: D401
        """Parse ``text`` back into a value, raising ``CodecError`` on failure."""
