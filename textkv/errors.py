from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    IO = "io"
    FORMAT = "format"
    TYPE = "type"
    VALUE = "value"
    KEY = "key"


class StoreError(Exception):
    """Base class for everything the codec and store raise."""

    category: ErrorCategory = ErrorCategory.VALUE


# Codec errors ---------------------------------------------------------------


class CodecError(StoreError, ValueError):
    """Text could not be decoded into a value."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class InvalidNumber(CodecError):
    def __init__(self, text: str, kind: str) -> None:
        super().__init__(f"Invalid {kind}: {text!r}", text)
        self.kind = kind


class InvalidListFormat(CodecError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid list format: {text}", text)


class InvalidMapFormat(CodecError):
    def __init__(self, text: str, piece: str) -> None:
        super().__init__(f"Invalid map entry {piece!r} in: {text}", text)
        self.piece = piece


class MismatchedBrackets(CodecError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Mismatched brackets in value: {text}", text)


class MismatchedQuotes(CodecError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Mismatched quotes in string: {text}", text)


# Store errors ---------------------------------------------------------------


class FileOpenError(StoreError):
    category = ErrorCategory.IO

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class MalformedLine(StoreError):
    category = ErrorCategory.FORMAT

    def __init__(self, line: str, line_no: int | None = None) -> None:
        super().__init__(f"Malformed line: {line}")
        self.line = line
        self.line_no = line_no


class UnencodableValue(StoreError):
    """The encoded value contains a line terminator and cannot be persisted."""

    category = ErrorCategory.FORMAT

    def __init__(self, key: str, encoded: str) -> None:
        super().__init__(f"Value for key '{key}' contains a newline: {encoded!r}")
        self.key = key
        self.encoded = encoded


class TypeMismatch(StoreError):
    category = ErrorCategory.TYPE

    def __init__(self, key: str, expected: str, found: str) -> None:
        super().__init__(f"Type mismatch for key '{key}': expected '{expected}', got '{found}'.")
        self.key = key
        self.expected = expected
        self.found = found


class DeserializationError(StoreError):
    """Wraps the :class:`CodecError` raised while decoding one entry."""

    def __init__(self, key: str, cause: CodecError) -> None:
        super().__init__(f"Deserialization error for key '{key}': {cause}")
        self.key = key
        self.cause = cause


class InvalidKey(StoreError, ValueError):
    """Keys must be non-empty and free of ``:``, ``=`` and newlines."""

    category = ErrorCategory.KEY

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid key: {key!r}")
        self.key = key


class KeyEmpty(InvalidKey):
    def __init__(self, line: str | None = None) -> None:
        message = f"Empty key in line: {line}" if line is not None else "Key must not be empty"
        super().__init__("", message)
        self.line = line
