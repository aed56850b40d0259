from __future__ import annotations

import json
from typing import Any, Mapping, TypeVar

from ..locations import read_source

T = TypeVar("T")


class JsonAdapter:
    """Serializes a mapping as compact JSON, e.g. {"test":"value"}."""

    def load(self, source: Any) -> Mapping[str, Any]:
        return json.loads(read_source(source))

    def write(self, target: T, data: Mapping[str, Any]) -> T:
        target.write(json.dumps(data, separators=(",", ":"), ensure_ascii=False))
        return target
