from __future__ import annotations

from pathlib import Path
from typing import Protocol

from domain.snapshot import Snapshot


class SnapshotStore(Protocol):
    def write(self, snapshot: Snapshot) -> Path: ...


class JsonSnapshotStore(SnapshotStore):
    """Keeps only the latest snapshot; each write replaces the previous file."""

    def __init__(self, *, path: Path) -> None:
        self.path = path

    def write(self, snapshot: Snapshot) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        tmp_path.write_text(snapshot.to_json() + "\n", encoding="utf-8")
        tmp_path.replace(self.path)
        return self.path


__all__ = ["JsonSnapshotStore", "SnapshotStore"]
