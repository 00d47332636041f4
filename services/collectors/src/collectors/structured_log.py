from __future__ import annotations

import json


def log_event(msg: str, **extra) -> None:
    """Emit one JSON log line; CloudWatch picks stdout up as-is."""
    entry = {"msg": msg}
    entry.update(extra)
    print(json.dumps(entry, default=str))
