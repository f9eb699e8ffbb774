"""SHUNT FILE PURPOSE
Purpose: default shunt definition, available on every site.
Hot path: no (read once at registry population).
Feature flags: none.
Failure mode: none (static definition).
"""

from __future__ import annotations


def shunts() -> dict[str, str]:
    return {
        "shunt": "The default shunt. Enable it to put every feature that checks it into its degraded mode.",
    }


PROVIDER = {
    "key": "default",
    "shunts": shunts,
}
