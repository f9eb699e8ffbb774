from __future__ import annotations

import pytest

from shunt.registry import DefinitionRegistry, ShuntDefinition


def test_definitions_merge_sorted_by_name() -> None:
    registry = DefinitionRegistry([lambda: {"zeta": "z", "alpha": "a"}, lambda: {"mid": "m"}])

    assert list(registry.list_definitions().keys()) == ["alpha", "mid", "zeta"]
    assert registry.names() == ["alpha", "mid", "zeta"]
    assert registry.definitions()[0] == ShuntDefinition(name="alpha", description="a")


def test_last_provider_wins_on_collision() -> None:
    registry = DefinitionRegistry([lambda: {"a": "first"}, lambda: {"a": "second"}])

    assert registry.describe("a") == "second"
    assert registry.describe("missing") is None


def test_providers_called_once_and_cache_is_read_only() -> None:
    calls = {"n": 0}

    def provider() -> dict[str, str]:
        calls["n"] += 1
        return {"a": "desc a"}

    registry = DefinitionRegistry([provider])
    first = registry.list_definitions()
    registry.list_definitions()
    registry.exists("a")

    assert calls["n"] == 1
    with pytest.raises(TypeError):
        first["b"] = "nope"  # type: ignore[index]


def test_exists_membership() -> None:
    registry = DefinitionRegistry([lambda: {"a": "desc a"}])

    assert registry.exists("a") is True
    assert registry.exists("b") is False


def test_register_after_population_is_refused() -> None:
    registry = DefinitionRegistry()
    registry.register_provider(lambda: {"a": "desc a"})
    registry.list_definitions()

    with pytest.raises(RuntimeError):
        registry.register_provider(lambda: {"b": "desc b"})


def test_provider_returning_non_mapping_raises() -> None:
    registry = DefinitionRegistry([lambda: ["a"]])  # type: ignore[list-item]

    with pytest.raises(ValueError):
        registry.list_definitions()


def test_empty_registry() -> None:
    registry = DefinitionRegistry()

    assert dict(registry.list_definitions()) == {}
    assert registry.definitions() == []


def test_blank_shunt_name_rejected_at_listing() -> None:
    registry = DefinitionRegistry([lambda: {"a": "desc a"}, lambda: {"  ": "blank"}])

    with pytest.raises(ValueError, match="empty shunt name"):
        registry.list_definitions()
