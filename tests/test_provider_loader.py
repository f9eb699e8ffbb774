from __future__ import annotations

import textwrap

import pytest

from shunt.provider_loader import load_providers
from shunt.registry import DefinitionRegistry
from shunt.runtime import build_runtime
from shunt.status import StatusMutationService, StatusQueryService
from shunt.store import MemoryVariableStore, StatusStore


def _write_package(root, name: str, modules: dict[str, str]) -> None:
    pkg = root / name
    pkg.mkdir()
    for mod, src in modules.items():
        (pkg / f"{mod}.py").write_text(textwrap.dedent(src), encoding="utf-8")


def test_default_provider_is_discovered() -> None:
    rt = build_runtime(variables=MemoryVariableStore())

    assert "default" in rt.provider_keys
    assert rt.query.exists("shunt") is True
    assert rt.query.is_enabled("shunt") is False


def test_invalid_providers_are_skipped_and_hooks_registered(monkeypatch, tmp_path) -> None:
    _write_package(
        tmp_path,
        "loader_case_providers",
        {
            "alpha": """
                CALLS = []

                def shunts():
                    return {"alpha": "Alpha shunt"}

                PROVIDER = {"key": "alpha", "shunts": shunts, "on_enable": CALLS.append}
            """,
            "broken": """
                PROVIDER = {"key": "broken"}
            """,
            "no_contract": """
                VALUE = 1
            """,
            "_private": """
                PROVIDER = {"key": "private", "shunts": lambda: {"private": "x"}}
            """,
        },
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    registry = DefinitionRegistry()
    store = StatusStore(MemoryVariableStore())
    query = StatusQueryService(registry, store)
    mutation = StatusMutationService(registry, query, store, feedback=lambda msg, sev: None)

    keys = load_providers(registry, mutation, package="loader_case_providers")
    mutation.enable_shunt("alpha")

    import loader_case_providers.alpha as alpha

    assert keys == ["alpha"]
    assert registry.names() == ["alpha"]
    assert alpha.CALLS == ["alpha"]


def test_build_runtime_extra_providers_without_discovery() -> None:
    rt = build_runtime(variables=MemoryVariableStore(), discover=False, providers=[lambda: {"x": "X"}])

    assert rt.provider_keys == []
    assert rt.registry.names() == ["x"]


def test_build_runtime_memory_backend_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SHUNT_STORE", "memory")

    rt = build_runtime(discover=False)

    assert isinstance(rt.store.variables, MemoryVariableStore)


def test_build_runtime_rejects_unknown_backend(monkeypatch) -> None:
    monkeypatch.setenv("SHUNT_STORE", "redis")

    with pytest.raises(ValueError, match="redis"):
        build_runtime(discover=False)
