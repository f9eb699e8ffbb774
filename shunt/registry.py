"""SHUNT FILE PURPOSE
Purpose: shunt definition registry (provider callbacks merged into a sorted, cached mapping).
Hot path: low (read-only lookups after first population).
Feature flags: none.
Failure mode: provider returning a non-mapping => ValueError on first listing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

ShuntProvider = Callable[[], Mapping[str, str]]


@dataclass(frozen=True)
class ShuntDefinition:
    name: str
    description: str


class DefinitionRegistry:
    """Collects shunt definitions from registered providers.

    Providers are invoked once, on the first listing. The merged result is
    sorted by name and kept for the lifetime of the registry; later provider
    registration is refused rather than silently ignored.
    """

    def __init__(self, providers: Iterable[ShuntProvider] = ()) -> None:
        self._providers: list[ShuntProvider] = list(providers)
        self._definitions: Mapping[str, str] | None = None

    def register_provider(self, provider: ShuntProvider) -> None:
        if self._definitions is not None:
            raise RuntimeError("shunt definitions already computed; register providers at startup")
        if not callable(provider):
            raise ValueError("provider must be callable")
        self._providers.append(provider)

    def list_definitions(self) -> Mapping[str, str]:
        if self._definitions is None:
            merged: dict[str, str] = {}
            for provider in self._providers:
                out = provider()
                if not isinstance(out, Mapping):
                    raise ValueError(f"shunt provider {provider!r} returned {type(out).__name__}, expected mapping")
                for name, description in out.items():
                    key = str(name)
                    if not key.strip():
                        raise ValueError(f"shunt provider {provider!r} returned an empty shunt name")
                    # last writer wins on collisions
                    merged[key] = str(description)
            self._definitions = MappingProxyType(dict(sorted(merged.items())))
        return self._definitions

    def definitions(self) -> list[ShuntDefinition]:
        return [ShuntDefinition(name=k, description=v) for k, v in self.list_definitions().items()]

    def names(self) -> list[str]:
        return list(self.list_definitions().keys())

    def exists(self, name: str) -> bool:
        return name in self.list_definitions()

    def describe(self, name: str) -> str | None:
        return self.list_definitions().get(name)
