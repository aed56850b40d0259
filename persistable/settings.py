from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Builder defaults
    default_adapter: str
    default_persist_method: str

    # Path stores
    atomic_writes: bool


def get_settings(env_file: str | None = None) -> Settings:
    if env_file is not None:
        # Real environment variables take precedence over the file.
        load_dotenv(env_file, override=False)

    default_adapter = os.getenv("PERSISTABLE_DEFAULT_ADAPTER", "json").strip().lower() or "json"
    default_persist_method = os.getenv("PERSISTABLE_PERSIST_METHOD", "persist").strip() or "persist"

    # Off by default: replacing the file breaks open handles and symlinked stores.
    atomic_writes = _env_bool("PERSISTABLE_ATOMIC_WRITES", False)

    return Settings(
        default_adapter=default_adapter,
        default_persist_method=default_persist_method,
        atomic_writes=atomic_writes,
    )
