"""SHUNT FILE PURPOSE
Purpose: policy checks for provider modules (PROVIDER contract + no cross-provider imports).
Hot path: no.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import NoReturn

REQUIRED = {"key", "shunts"}


def fail(msg: str) -> NoReturn:
    print(f"PROVIDER_CHECK_FAIL: {msg}", file=sys.stderr)
    raise SystemExit(1)


def _provider_keys(tree: ast.Module) -> set[str] | None:
    for node in tree.body:
        if not isinstance(node, ast.Assign):
            continue
        if not any(isinstance(t, ast.Name) and t.id == "PROVIDER" for t in node.targets):
            continue
        if not isinstance(node.value, ast.Dict):
            return None
        return {k.value for k in node.value.keys if isinstance(k, ast.Constant) and isinstance(k.value, str)}
    return None


def main(provider_dir: str = "providers") -> None:
    for path in sorted(Path(provider_dir).glob("*.py")):
        if path.name.startswith("_"):
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for a in node.names:
                    if a.name == "providers" or a.name.startswith("providers."):
                        fail(f"cross-provider import in {path}")
            if isinstance(node, ast.ImportFrom):
                if node.level and node.level > 0:
                    fail(f"relative import not allowed in {path}")
                mod = node.module or ""
                if mod == "providers" or mod.startswith("providers."):
                    fail(f"cross-provider import in {path}")

        keys = _provider_keys(tree)
        if keys is None:
            fail(f"PROVIDER dict missing in {path}")
        for k in sorted(REQUIRED - keys):
            fail(f"PROVIDER missing key {k} in {path}")

    print("PROVIDER_CHECK_OK")


if __name__ == "__main__":
    main()
