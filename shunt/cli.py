"""SHUNT FILE PURPOSE
Purpose: operator CLI to list, enable and disable shunts without the HTTP surface.
Hot path: no.
Feature flags: SHUNT_STORE, SHUNT_DB_PATH.
Failure mode: exit 1 when any requested shunt is unknown; store errors propagate.
"""

from __future__ import annotations

import argparse
import sys

from shunt.feedback import FeedbackCollector, Severity
from shunt.runtime import ShuntRuntime, build_runtime
from shunt.status import ShuntStatus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shunt", description="Inspect and change shunt status.")
    sub = parser.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List shunts with their status.")
    ls.add_argument(
        "--status",
        choices=[s.value for s in ShuntStatus],
        help="Only list shunts with this status.",
    )

    en = sub.add_parser("enable", help="Enable one shunt, or every shunt when no name is given.")
    en.add_argument("name", nargs="?")

    dis = sub.add_parser("disable", help="Disable one shunt, or every shunt when no name is given.")
    dis.add_argument("name", nargs="?")
    return parser


def _print_list(rt: ShuntRuntime, status: str | None) -> None:
    statuses = rt.query.statuses()
    for d in rt.registry.definitions():
        enabled = statuses[d.name]
        label = ShuntStatus.ENABLED.value if enabled else ShuntStatus.DISABLED.value
        if status is not None and label != status:
            continue
        print(f"{d.name}\t{label}\t{d.description}")


def main(argv: list[str] | None = None, runtime: ShuntRuntime | None = None) -> int:
    args = build_parser().parse_args(argv)
    rt = runtime if runtime is not None else build_runtime()

    if args.command == "list":
        _print_list(rt, args.status)
        return 0

    collector = FeedbackCollector()
    mutation = rt.mutation.with_feedback(collector)
    if args.command == "enable":
        mutation.enable_shunt(args.name)
    else:
        mutation.disable_shunt(args.name)

    for m in collector.messages():
        out = sys.stderr if m.severity is Severity.ERROR else sys.stdout
        print(f"[{m.severity.value}] {m.message}", file=out)
    return 1 if collector.has_errors() else 0
