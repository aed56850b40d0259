from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnknownAdapter
from .persistence import Persistence, codec_accessor
from .registry import ADAPTERS, CodecRegistry
from .settings import get_settings

logger = logging.getLogger(__name__)

_RESERVED_NAMES = frozenset({"adapter", "load"})
# A host mapping defines these itself and would win over the bundle.
_MAPPING_NAMES = frozenset(dir(dict))


class BuilderOptions(BaseModel):
    """
    Configuration for one bundle. Unknown keys are ignored.

    Defaults come from settings: adapter="json", persist_method="persist".
    """

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    adapter: str = Field(default_factory=lambda: get_settings().default_adapter)
    persist_method: str = Field(default_factory=lambda: get_settings().default_persist_method)

    @field_validator("adapter")
    @classmethod
    def _normalize_adapter(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("persist_method")
    @classmethod
    def _check_persist_method(cls, value: str) -> str:
        if not value.isidentifier() or keyword.iskeyword(value):
            raise ValueError(f"{value!r} is not a valid method name")
        if value.startswith("_"):
            raise ValueError(f"{value!r} must be a public name")
        if value in _RESERVED_NAMES or value in _MAPPING_NAMES:
            raise ValueError(f"{value!r} is already used by the bundle or the host mapping")
        return value


@dataclass
class BundleDraft:
    """The bundle while hooks are still working on it."""

    name: str
    bases: list[type] = field(default_factory=list)
    namespace: dict[str, Any] = field(default_factory=dict)


Hook = Union[str, Callable[["Builder"], None]]


class Builder:
    """
    Builds a Persistable mixin with its own configuration.

    Each ``build`` returns a new class, so configuring one host type never
    affects another. The operations of every class in ``inclusions`` are
    copied into the bundle, then ``hooks`` run in order against
    ``self.draft``. A hook is either the name of a method on the builder or
    a callable taking the builder; subclasses extend ``hooks`` and instances
    can ``add_hook``.

        class Settings(dict, build(adapter="yaml", persist_method="save")):
            pass
    """

    hooks: ClassVar[tuple[Hook, ...]] = ("add_adapter", "override_persist_method")
    inclusions: ClassVar[tuple[type, ...]] = (Persistence,)

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        registry: CodecRegistry | None = None,
        name: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.options = BuilderOptions.model_validate({**(options or {}), **kwargs})
        self.registry = registry if registry is not None else ADAPTERS
        self.name = name
        self.hooks = list(type(self).hooks)
        self.draft: BundleDraft | None = None

    def add_hook(self, hook: Hook, *, before: Hook | None = None) -> "Builder":
        if before is None:
            self.hooks.append(hook)
        else:
            self.hooks.insert(self.hooks.index(before), hook)
        return self

    def build(self) -> type:
        name = self.name or f"{self.options.adapter.title()}Persistable"
        self.draft = BundleDraft(name=name, namespace=self._included_namespace())
        self.draft.namespace["__module__"] = __name__

        for hook in self.hooks:
            if isinstance(hook, str):
                getattr(self, hook)()
            else:
                hook(self)

        bundle = type(self.draft.name, tuple(self.draft.bases), self.draft.namespace)
        logger.debug(
            "Built %s (adapter=%s, persist_method=%s)",
            bundle.__name__,
            self.options.adapter,
            self.options.persist_method,
        )
        self.draft = None
        return bundle

    def _included_namespace(self) -> dict[str, Any]:
        namespace: dict[str, Any] = {}
        for inclusion in self.inclusions:
            for attr, value in vars(inclusion).items():
                if attr.startswith("__") and attr.endswith("__"):
                    continue
                namespace[attr] = value
        return namespace

    # Hooks

    def add_adapter(self) -> None:
        identifier = self.options.adapter
        factory = self.registry.lookup(identifier)
        if factory is None:
            known = ", ".join(self.registry.identifiers()) or "none"
            raise UnknownAdapter(f"No adapter registered as {identifier!r} (registered: {known}).")

        self.draft.bases.append(codec_accessor(identifier, factory))

    def override_persist_method(self) -> None:
        method = self.options.persist_method
        if method == "persist":
            return

        namespace = self.draft.namespace
        namespace[method] = namespace.pop("persist")


def build(options: Mapping[str, Any] | None = None, **kwargs: Any) -> type:
    """Shortcut for ``Builder(options, **kwargs).build()``."""
    return Builder(options, **kwargs).build()
