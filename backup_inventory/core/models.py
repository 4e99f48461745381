"""Data models for backup inventory."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


# Timestamp reported for a backup that holds no files.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class FileClass(Enum):
    """Whether a file may be rewritten after creation."""
    MUTABLE = "mutable"
    IMMUTABLE = "immutable"


class ErrorPolicy(Enum):
    """What a walk consumer does with a failed traversal step."""
    SKIP = "skip"
    COLLECT = "collect"


@dataclass(frozen=True)
class BackupRoot:
    """A top-level entry on the remote server."""
    name: str
    path: str


@dataclass(frozen=True)
class RemoteEntry:
    """A node as reported by the remote server."""
    name: str
    path: str
    is_directory: bool
    size: Optional[int]
    modified_at: Optional[datetime]


@dataclass(frozen=True)
class FileEntry:
    """A non-directory node encountered during a walk."""
    path: str
    size: int
    modified_at: datetime


@dataclass(frozen=True)
class StepError:
    """A traversal step that could not be completed."""
    path: str
    reason: str


@dataclass(frozen=True)
class WalkStep:
    """Result of one traversal step: either an entry or an error."""
    path: str
    entry: Optional[RemoteEntry] = None
    error: Optional[StepError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BackupAggregate:
    """Summary of one backup: file count, byte totals and latest change."""
    name: str
    file_count: int = 0
    mutable_bytes: int = 0
    immutable_bytes: int = 0
    last_modified: datetime = ZERO_TIME
    skipped_paths: List[str] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return self.mutable_bytes + self.immutable_bytes

    def add(self, entry: FileEntry, file_class: FileClass) -> None:
        """Fold a single file into the aggregate."""
        if file_class is FileClass.IMMUTABLE:
            self.immutable_bytes += entry.size
        else:
            self.mutable_bytes += entry.size
        self.file_count += 1
        if entry.modified_at > self.last_modified:
            self.last_modified = entry.modified_at

    def merge(self, other: "BackupAggregate") -> "BackupAggregate":
        """Combine two partial aggregates of the same backup.

        Args:
            other: Aggregate over a disjoint set of files.

        Returns:
            New aggregate equal to aggregating both file sets at once.
        """
        return BackupAggregate(
            name=self.name,
            file_count=self.file_count + other.file_count,
            mutable_bytes=self.mutable_bytes + other.mutable_bytes,
            immutable_bytes=self.immutable_bytes + other.immutable_bytes,
            last_modified=max(self.last_modified, other.last_modified),
            skipped_paths=self.skipped_paths + other.skipped_paths
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'file_count': self.file_count,
            'mutable_bytes': self.mutable_bytes,
            'immutable_bytes': self.immutable_bytes,
            'last_modified': self.last_modified.isoformat(),
            'skipped_paths': list(self.skipped_paths)
        }
