"""
Per-repository result records and the thread-safe store collecting them.
"""

import threading
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class RepoStatus(str, Enum):
    """Outcome of processing one repository."""

    PENDING = "Pending"
    SUCCESS = "Success"
    FAILED = "Failed"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class RepositoryRecord:
    """One row of the summary: a discovered repository and its outcome."""

    path: Path
    remote: str
    status: RepoStatus
    detail: str = ""  # last stderr line of a failed git command


class ResultStore:
    """Insertion-ordered collection of RepositoryRecord keyed by path.

    Every operation takes the same lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: dict[Path, RepositoryRecord] = {}

    def append(self, record: RepositoryRecord) -> None:
        """Add a record. Raises ValueError if its path is already present."""
        with self._lock:
            if record.path in self._records:
                raise ValueError(f"Repository already recorded: {record.path}")
            self._records[record.path] = record

    def update_status(self, path: Path, status: RepoStatus, detail: str = "") -> None:
        """Overwrite the status of the record for path; no-op if absent."""
        with self._lock:
            record = self._records.get(path)
            if record is None:
                return
            record.status = status
            record.detail = detail

    def records(self) -> list[RepositoryRecord]:
        """Snapshot of all records, in the order they were appended."""
        with self._lock:
            return [replace(r) for r in self._records.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
