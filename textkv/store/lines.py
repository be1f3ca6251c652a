"""The ``key:type=encoded-value`` line format."""

from __future__ import annotations

from ..errors import InvalidKey, KeyEmpty, MalformedLine, UnencodableValue

FORBIDDEN_KEY_CHARS = ":=\n\r"


def validate_key(key: str) -> str:
    if not key:
        raise KeyEmpty()
    bad = [ch for ch in FORBIDDEN_KEY_CHARS if ch in key]
    if bad:
        raise InvalidKey(key, f"Key {key!r} must not contain {''.join(bad)!r}")
    return key


def format_line(key: str, type_tag: str, encoded: str) -> str:
    if "\n" in encoded:
        raise UnencodableValue(key, encoded)
    return f"{key}:{type_tag}={encoded}\n"


def decode_line(raw: bytes, line_no: int | None = None) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedLine(raw.decode("utf-8", "replace"), line_no) from exc


def parse_line(line: str, line_no: int | None = None) -> tuple[str, str, str]:
    """Split ``line`` into key, type tag and encoded value.

    The first ``:`` ends the key and the first ``=`` ends the tag, so the
    ``:`` must come before any ``=``. The encoded value may contain both.
    """

    colon = line.find(":")
    eq = line.find("=")
    if colon < 0 or eq < 0 or colon > eq:
        raise MalformedLine(line, line_no)
    key = line[:colon]
    if not key:
        raise KeyEmpty(line)
    return key, line[colon + 1 : eq], line[eq + 1 :]
