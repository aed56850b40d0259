from __future__ import annotations

import logging
from typing import Any

from . import facade
from .errors import NO_LOCATION_MESSAGE, UnknownLocation
from .interfaces import Codec, CodecFactory
from .locations import Location, normalize_store

logger = logging.getLogger(__name__)

_STORE_ATTR = "_persistable_store"


class Persistence:
    """
    Adds ``persist`` to a mapping type.

    The host only needs to behave like a ``dict``; it doesn't declare or
    initialize anything. ``adapter`` comes from a codec accessor mixed in
    next to this class (see ``codec_accessor``).
    """

    def persist(self, store: Any = None) -> Location:
        """
        Persist the mapping to ``store``.

        A string or path-like ``store`` is treated as a filesystem path; any
        other object must have ``write``. Once persisted, calling without
        ``store`` writes to the last location again.

        Raises UnknownLocation if no store was ever given.
        """
        # Recorded before writing, so a failed write still leaves it set.
        if store is not None:
            _set_store(self, store)

        current = _get_store(self)
        if current is None:
            raise UnknownLocation(NO_LOCATION_MESSAGE)

        facade.persist(self, {"adapter": self.adapter, "target": current})
        return current

    @classmethod
    def load(cls, source: Any) -> Any:
        """Build a new instance of the host type from ``source``."""
        factory = getattr(cls, "_persistable_codec", None)
        adapter = factory() if factory is not None else None
        return cls(facade.load(source, {"adapter": adapter}))


def _get_store(instance: Any) -> Location | None:
    return instance.__dict__.get(_STORE_ATTR)


def _set_store(instance: Any, store: Any) -> None:
    location = normalize_store(store)
    logger.debug("Recording store %r on %s", location, type(instance).__name__)
    instance.__dict__[_STORE_ATTR] = location


def codec_accessor(identifier: str, factory: CodecFactory) -> type:
    """Return a mixin whose ``adapter`` property builds a fresh codec per call."""

    def adapter(self: Any) -> Codec:
        return self._persistable_codec()

    return type(
        f"{identifier.title()}Accessor",
        (),
        {
            "__module__": __name__,
            "__doc__": f"Accessor for the {identifier!r} codec.",
            "_persistable_codec": staticmethod(factory),
            "adapter": property(adapter),
        },
    )
