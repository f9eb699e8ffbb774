from __future__ import annotations

import logging

from shunt.feedback import Severity, log_feedback
from shunt.logging import resolve_level


def test_level_defaults_follow_debug_flag(monkeypatch) -> None:
    monkeypatch.delenv("SHUNT_LOG_LEVEL", raising=False)
    monkeypatch.setenv("SHUNT_DEBUG", "0")
    assert resolve_level() == logging.WARNING

    monkeypatch.setenv("SHUNT_DEBUG", "1")
    assert resolve_level() == logging.INFO


def test_level_override_wins_and_unknown_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("SHUNT_DEBUG", "0")
    monkeypatch.setenv("SHUNT_LOG_LEVEL", "debug")
    assert resolve_level() == logging.DEBUG

    monkeypatch.setenv("SHUNT_LOG_LEVEL", "chatty")
    assert resolve_level() == logging.WARNING


def test_log_feedback_maps_severity_to_level(caplog) -> None:
    caplog.set_level(logging.INFO, logger="shunt")

    log_feedback('No such shunt "z".', Severity.ERROR)
    log_feedback('Shunt "b" is already disabled.', Severity.WARNING)
    log_feedback('Shunt "a" has been enabled.', "status")  # type: ignore[arg-type]

    records = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "shunt"]
    assert records == [
        (logging.ERROR, 'SHUNT_FEEDBACK No such shunt "z".'),
        (logging.WARNING, 'SHUNT_FEEDBACK Shunt "b" is already disabled.'),
        (logging.INFO, 'SHUNT_FEEDBACK Shunt "a" has been enabled.'),
    ]
