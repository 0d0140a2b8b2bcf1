import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def write_output(path: Path, data: Any) -> None:
    # overwritten wholesale on every run
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def append_timestamp(path: Path, now: datetime | None = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(f"{stamp}\n")
    return stamp
