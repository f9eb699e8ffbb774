"""SHUNT FILE PURPOSE
Purpose: wire registry, status store and services into one explicitly constructed runtime.
Hot path: no (startup only).
Feature flags: SHUNT_STORE, SHUNT_DB_PATH.
Failure mode: unknown store backend => ValueError at startup.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from shunt.config import STORE_BACKENDS, db_path, store_backend
from shunt.feedback import FeedbackSink, log_feedback
from shunt.provider_loader import load_providers
from shunt.registry import DefinitionRegistry, ShuntProvider
from shunt.status import StatusMutationService, StatusQueryService
from shunt.store import MemoryVariableStore, SqliteVariableStore, StatusStore, VariableStore


@dataclass
class ShuntRuntime:
    registry: DefinitionRegistry
    store: StatusStore
    query: StatusQueryService
    mutation: StatusMutationService
    provider_keys: list[str] = field(default_factory=list)


def variable_store_from_env() -> VariableStore:
    backend = store_backend()
    if backend not in STORE_BACKENDS:
        raise ValueError(f"unknown SHUNT_STORE backend: {backend}")
    if backend == "memory":
        return MemoryVariableStore()
    return SqliteVariableStore(db_path())


def build_runtime(
    variables: VariableStore | None = None,
    feedback: FeedbackSink = log_feedback,
    discover: bool = True,
    providers: Iterable[ShuntProvider] = (),
) -> ShuntRuntime:
    registry = DefinitionRegistry()
    store = StatusStore(variables if variables is not None else variable_store_from_env())
    query = StatusQueryService(registry, store)
    mutation = StatusMutationService(registry, query, store, feedback=feedback)

    keys = load_providers(registry, mutation) if discover else []
    for provider in providers:
        registry.register_provider(provider)

    return ShuntRuntime(registry=registry, store=store, query=query, mutation=mutation, provider_keys=keys)
