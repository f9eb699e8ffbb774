"""Shunt operator CLI (no HTTP).

Supported invocation from repo root:
  python scripts/shunt_cli.py list [--status enabled|disabled]
  python scripts/shunt_cli.py enable [name]
  python scripts/shunt_cli.py disable [name]

Exit: 0 on success, 1 if any named shunt is unknown, 2 on usage errors.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shunt.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
