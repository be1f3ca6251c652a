"""Typed key-value store with a line-oriented text file format.

Values are encoded by the codecs in :mod:`textkv.codec`; stores in
:mod:`textkv.store` keep them in memory and persist one ``key:type=value``
line per entry. Nothing is read or written on import.
"""

from .codec import Scalar, StrList, StrMap
from .store import ScalarStore, Store, make_store

__all__ = [
    "Scalar",
    "ScalarStore",
    "Store",
    "StrList",
    "StrMap",
    "__version__",
    "make_store",
]

__version__ = "0.1.0"
