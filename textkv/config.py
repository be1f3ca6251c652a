from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ValueKind = Literal["string", "int", "float", "list", "map", "value", "scalar"]
ElementKind = Literal["string", "int", "float"]


class Settings(BaseSettings):
    """Runtime configuration for the store tools.

    Values are loaded from ``TEXTKV_*`` environment variables (or ``.env``)
    and may be overridden via CLI flags.
    """

    # File the CLI reads and writes when no --file is given
    store_path: Path = Path("store.kv")

    # Kind of values held by the store. ``scalar`` mixes int/float/string
    # entries with a tag per line; ``value`` is the tagged string/list/map kind.
    value_kind: ValueKind = "scalar"
    element_kind: ElementKind = "string"

    # Reject map entries without a ``:`` instead of skipping them
    strict_maps: bool = False

    # Write to a temp file and replace the destination on persist
    atomic_writes: bool = True

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_prefix="TEXTKV_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
