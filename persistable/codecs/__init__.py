from __future__ import annotations

from ..registry import CodecRegistry
from .json_adapter import JsonAdapter
from .yaml_adapter import YamlAdapter


def register_codecs(registry: CodecRegistry) -> CodecRegistry:
    """Register the reference codecs. Call once before building any bundle."""
    return registry.register("json", JsonAdapter).register("yaml", YamlAdapter)


__all__ = [
    "JsonAdapter",
    "YamlAdapter",
    "register_codecs",
]
