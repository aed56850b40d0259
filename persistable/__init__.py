from __future__ import annotations

from .builder import Builder, BuilderOptions, build
from .codecs import JsonAdapter, YamlAdapter, register_codecs
from .errors import PersistableError, UnknownAdapter, UnknownLocation
from .facade import load, persist
from .locations import PathLocation
from .persistence import Persistence
from .registry import ADAPTERS, CodecRegistry, register_adapter

register_codecs(ADAPTERS)

# Default bundle: JSON codec, exposed as ``persist``.
Persistable = Builder({"adapter": "json", "persist_method": "persist"}, name="Persistable").build()

__all__ = [
    "ADAPTERS",
    "Builder",
    "BuilderOptions",
    "CodecRegistry",
    "JsonAdapter",
    "PathLocation",
    "Persistable",
    "PersistableError",
    "Persistence",
    "UnknownAdapter",
    "UnknownLocation",
    "YamlAdapter",
    "build",
    "load",
    "persist",
    "register_adapter",
    "register_codecs",
]
