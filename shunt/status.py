"""SHUNT FILE PURPOSE
Purpose: shunt status queries and status changes (idempotence, notifications, feedback).
Hot path: queries yes (cheap store reads); changes no (operator-driven).
Feature flags: none.
Failure mode: unknown names and no-op changes are reported per item, never raised;
store and listener errors propagate.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from shunt import feedback as fb
from shunt.config import is_debug
from shunt.feedback import FeedbackSink, Severity, log_feedback
from shunt.logging import logger
from shunt.registry import DefinitionRegistry
from shunt.store import StatusStore

ShuntListener = Callable[[str], None]


class ShuntStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class StatusChangeRequest:
    name: str
    desired: bool
    warn_on_noop: bool = True


class StatusQueryService:
    def __init__(self, registry: DefinitionRegistry, store: StatusStore) -> None:
        self.registry = registry
        self.store = store

    def exists(self, name: str) -> bool:
        return self.registry.exists(name)

    def is_enabled(self, name: str) -> bool:
        if not self.exists(name):
            return False
        return self.store.read(name)

    def statuses(self) -> dict[str, bool]:
        return {name: self.is_enabled(name) for name in self.registry.names()}

    def list_by_status(self, status: ShuntStatus) -> list[str]:
        want = ShuntStatus(status) is ShuntStatus.ENABLED
        return [name for name, enabled in self.statuses().items() if enabled == want]

    def list_enabled(self) -> list[str]:
        return self.list_by_status(ShuntStatus.ENABLED)

    def list_disabled(self) -> list[str]:
        return self.list_by_status(ShuntStatus.DISABLED)


class StatusMutationService:
    """Applies status changes one item at a time.

    A batch never aborts: unknown names become error feedback, no-op changes
    become (optional) warnings, and every real change is written, broadcast to
    listeners, then confirmed. Nothing already applied is rolled back.
    """

    def __init__(
        self,
        registry: DefinitionRegistry,
        query: StatusQueryService,
        store: StatusStore,
        feedback: FeedbackSink = log_feedback,
    ) -> None:
        self.registry = registry
        self.query = query
        self.store = store
        self.feedback = feedback
        self._enable_listeners: list[ShuntListener] = []
        self._disable_listeners: list[ShuntListener] = []

    def on_enable(self, callback: ShuntListener) -> None:
        self._enable_listeners.append(callback)

    def on_disable(self, callback: ShuntListener) -> None:
        self._disable_listeners.append(callback)

    def with_feedback(self, feedback: FeedbackSink) -> StatusMutationService:
        """Same registry, store and listeners; messages go to ``feedback``."""
        other = StatusMutationService(self.registry, self.query, self.store, feedback=feedback)
        other._enable_listeners = self._enable_listeners
        other._disable_listeners = self._disable_listeners
        return other

    def set_status(self, name: str, desired: bool, warn_on_noop: bool = True) -> None:
        self.set_status_multiple({name: desired}, warn_on_noop=warn_on_noop)

    def set_status_multiple(self, changes: Mapping[str, bool], warn_on_noop: bool = True) -> None:
        for name, desired in changes.items():
            self._apply(StatusChangeRequest(name=name, desired=bool(desired), warn_on_noop=warn_on_noop))

    def enable_shunt(self, name: str | None = None) -> None:
        self._set_one_or_all(name, True)

    def disable_shunt(self, name: str | None = None) -> None:
        self._set_one_or_all(name, False)

    def _set_one_or_all(self, name: str | None, desired: bool) -> None:
        if name is not None:
            self.set_status(name, desired)
            return
        self.set_status_multiple({n: desired for n in self.registry.names()})

    def _apply(self, req: StatusChangeRequest) -> None:
        if not self.registry.exists(req.name):
            logger.warning("SHUNT_UNKNOWN name=%s", req.name)
            self.feedback(fb.no_such_shunt(req.name), Severity.ERROR)
            return

        if self.query.is_enabled(req.name) == req.desired:
            if is_debug():
                logger.info("SHUNT_NOOP name=%s desired=%s", req.name, req.desired)
            if req.warn_on_noop:
                self.feedback(fb.already(req.name, req.desired), Severity.WARNING)
            return

        self.store.write(req.name, req.desired)
        listeners = self._enable_listeners if req.desired else self._disable_listeners
        for listener in listeners:
            listener(req.name)
        logger.info("%s name=%s", "SHUNT_ENABLED" if req.desired else "SHUNT_DISABLED", req.name)
        self.feedback(fb.changed(req.name, req.desired), Severity.STATUS)
