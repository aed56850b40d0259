from __future__ import annotations

import logging
import threading

from .interfaces import CodecFactory

logger = logging.getLogger(__name__)


class CodecRegistry:
    """
    Maps a short codec identifier ("json", "yaml") to a codec factory.

    Inserts are guarded so concurrent registration cannot tear the map;
    lookups after startup read without the lock. The last registration for
    an identifier wins.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._factories: dict[str, CodecFactory] = {}

    def register(self, identifier: str, factory: CodecFactory) -> "CodecRegistry":
        key = _normalize(identifier)
        with self._guard:
            if key in self._factories:
                logger.debug("Replacing codec registered as %r", key)
            self._factories[key] = factory
        logger.debug("Registered codec %r -> %r", key, factory)
        return self

    def lookup(self, identifier: str) -> CodecFactory | None:
        return self._factories.get(_normalize(identifier))

    def identifiers(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and _normalize(identifier) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def _normalize(identifier: str) -> str:
    return identifier.strip().lower()


ADAPTERS = CodecRegistry()


def register_adapter(identifier: str, factory: CodecFactory) -> CodecRegistry:
    """Register a codec factory on the process-wide registry."""
    return ADAPTERS.register(identifier, factory)
