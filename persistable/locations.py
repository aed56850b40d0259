from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from .interfaces import Writable
from .settings import get_settings


@dataclass(frozen=True)
class PathLocation:
    """
    A store on the local filesystem.

    Strings and path-like objects handed to ``persist`` are normalized to
    this so codecs can ``write`` to them like any other target.
    """

    path: Path
    atomic: bool = False

    def write(self, text: str) -> int:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic:
            return self.path.write_text(text, encoding="utf-8")

        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            written = f.write(text)
        tmp_path.replace(self.path)
        return written

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def exists(self) -> bool:
        return self.path.exists()

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)


# Either a filesystem store or an opaque writable object used as-is.
Location = Union[PathLocation, Writable]


def normalize_store(store: Any) -> Location:
    if isinstance(store, PathLocation):
        return store
    if isinstance(store, (str, os.PathLike)):
        return PathLocation(Path(store), atomic=get_settings().atomic_writes)
    return store


def read_source(source: Any) -> str:
    """
    Return the full text of a codec source.

    Readable objects are read, path-like objects are read from disk, and
    ``str``/``bytes`` are taken to be the document itself.
    """
    if hasattr(source, "read"):
        raw = source.read()
    elif isinstance(source, os.PathLike):
        raw = Path(source).read_bytes()
    else:
        raw = source

    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8")
    if isinstance(raw, str):
        return raw
    raise TypeError(f"Cannot read a document from {type(source).__name__}")
