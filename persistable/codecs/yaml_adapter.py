from __future__ import annotations

from typing import Any, Mapping, TypeVar

import yaml

from ..locations import read_source

T = TypeVar("T")


def _plain(value: Any) -> Any:
    # safe_dump refuses dict/list subclasses, so hand it builtin containers only.
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class YamlAdapter:
    """Serializes a mapping as a block-style YAML document."""

    def load(self, source: Any) -> Mapping[str, Any]:
        return yaml.safe_load(read_source(source)) or {}

    def write(self, target: T, data: Mapping[str, Any]) -> T:
        text = yaml.safe_dump(
            _plain(data),
            explicit_start=True,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        target.write(text)
        return target
