from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import NO_ADAPTER_MESSAGE, NO_LOCATION_MESSAGE, UnknownAdapter, UnknownLocation

logger = logging.getLogger(__name__)


def load(source: Any, options: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """
    Load a mapping from ``source``.

    ``options["adapter"]`` must be a codec instance (anything with ``load``).
    Raises UnknownAdapter when it is absent.
    """
    options = options or {}
    adapter = options.get("adapter")
    if adapter is None:
        raise UnknownAdapter(NO_ADAPTER_MESSAGE)

    return adapter.load(source)


def persist(data: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> Any:
    """
    Write ``data`` to ``options["target"]`` using ``options["adapter"]``.

    The adapter is checked before the target, so a call missing both raises
    UnknownAdapter. Returns whatever the codec's ``write`` returns (the target).
    """
    options = options or {}
    adapter = options.get("adapter")
    if adapter is None:
        raise UnknownAdapter(NO_ADAPTER_MESSAGE)
    target = options.get("target")
    if target is None:
        raise UnknownLocation(NO_LOCATION_MESSAGE)

    logger.debug("Persisting %d keys with %s to %r", len(data), type(adapter).__name__, target)
    return adapter.write(target, data)
