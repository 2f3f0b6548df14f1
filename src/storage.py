"""JSON persistence for the synced product list."""

import json
from pathlib import Path

from src.models import OutputRecord


def write_products(records: list[OutputRecord], path: Path) -> Path:
    """
    Overwrite `path` with the records as a pretty-printed JSON array.

    The file is written in place, not via a temp file; a crash mid-write
    leaves it truncated.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.to_dict() for record in records]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_products(path: Path) -> list[dict]:
    """
    Read a previously written product file.

    Not used by the sync itself; handy for tests and for diffing two runs.
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))
