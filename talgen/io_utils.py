"""Console reporting helpers for the talgen CLI.

`tokens` dumps the symbol table through `stable_json_dumps`; build warnings go
to stderr through `warn`.
"""

from __future__ import annotations

import json
import sys


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
