"""SHUNT FILE PURPOSE
Purpose: discover one-file shunt definition providers from `providers/`.
Hot path: no (startup only).
Feature flags: none.
Failure mode: invalid provider => skipped (debug logs only when SHUNT_DEBUG=1).
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any

from shunt.config import is_debug
from shunt.logging import logger
from shunt.registry import DefinitionRegistry
from shunt.status import StatusMutationService

REQUIRED = {"key", "shunts"}
HOOKS = ("on_enable", "on_disable")


def _validate(provider: Any) -> dict[str, Any] | None:
    if not isinstance(provider, dict):
        return None
    if not REQUIRED.issubset(provider.keys()):
        return None
    if not isinstance(provider.get("key"), str) or not provider["key"]:
        return None
    if not callable(provider.get("shunts")):
        return None
    for hook in HOOKS:
        if hook in provider and not callable(provider[hook]):
            return None
    return provider


def load_providers(
    registry: DefinitionRegistry,
    mutation: StatusMutationService | None = None,
    package: str = "providers",
) -> list[str]:
    pkg = importlib.import_module(package)
    keys: list[str] = []

    for mod in sorted(pkgutil.iter_modules(pkg.__path__), key=lambda m: m.name):
        if mod.ispkg or mod.name.startswith("_"):
            continue
        m = importlib.import_module(f"{package}.{mod.name}")
        d = _validate(getattr(m, "PROVIDER", None))
        if d is None:
            if is_debug():
                logger.warning("SHUNT_PROVIDER_INVALID module=%s", mod.name)
            continue

        registry.register_provider(d["shunts"])
        if mutation is not None:
            if "on_enable" in d:
                mutation.on_enable(d["on_enable"])
            if "on_disable" in d:
                mutation.on_disable(d["on_disable"])
        keys.append(d["key"])

    if is_debug():
        logger.info("SHUNT_PROVIDERS_LOADED keys=%s", keys)
    return keys
