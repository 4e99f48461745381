"""Per-backup aggregation of walked files."""

from typing import Iterable

from .classifier import classify
from .models import BackupAggregate, BackupRoot, FileEntry


class BackupAggregator:
    """Folds the files of one backup root into a BackupAggregate."""

    def __init__(self, root: BackupRoot):
        self.root = root
        self._aggregate = BackupAggregate(name=root.name)

    def relative_path(self, path: str) -> str:
        """Path of a file as seen from the directory holding the backups.

        The inventory root path is left out so that it never affects
        classification: '/srv/objects/daily/refs/main' becomes
        'daily/refs/main'.
        """
        if path == self.root.path or path.startswith(self.root.path.rstrip("/") + "/"):
            return self.root.name + path[len(self.root.path.rstrip("/")):]
        return path

    def add(self, entry: FileEntry) -> None:
        self._aggregate.add(entry, classify(self.relative_path(entry.path)))

    def consume(self, entries: Iterable[FileEntry]) -> "BackupAggregator":
        for entry in entries:
            self.add(entry)
        return self

    def result(self) -> BackupAggregate:
        return self._aggregate


def aggregate(root: BackupRoot, entries: Iterable[FileEntry]) -> BackupAggregate:
    """Aggregate all entries of one backup root.

    Args:
        root: Backup root the entries belong to.
        entries: Files found below the root, in any order.

    Returns:
        The finished aggregate.
    """
    return BackupAggregator(root).consume(entries).result()
