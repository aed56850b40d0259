from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Writable(Protocol):
    """Anything a codec can write serialized text into (file, StringIO, PathLocation)."""

    def write(self, text: str) -> Any:
        ...


class Codec(Protocol):
    """
    Stateless adapter between a byte source/sink and an in-memory mapping.

    Implementations raise whatever their parser raises on malformed input and
    whatever the target raises when it cannot be written.
    """

    def load(self, source: Any) -> Mapping[str, Any]:
        """Parse the whole source into a mapping."""
        ...

    def write(self, target: T, data: Mapping[str, Any]) -> T:
        """Serialize data fully into target and return target."""
        ...


CodecFactory = Callable[[], Codec]
