"""Shared test doubles for the inventory pipeline."""

import posixpath
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from backup_inventory.core.models import RemoteEntry
from backup_inventory.errors import TransportError


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
T2 = datetime(2024, 5, 2, 10, 0, tzinfo=timezone.utc)


class FakeLister:
    """In-memory remote tree with injectable failures.

    Directories are implied by the file paths below them; empty directories
    are given explicitly.
    """

    def __init__(self, files: Dict[str, Tuple[int, datetime]], directories: Iterable[str] = (),
                 fail_list: Iterable[str] = (), fail_stat: Iterable[str] = (),
                 incomplete: Iterable[str] = ()):
        self.files = dict(files)
        self.directories = list(directories)
        self.fail_list = set(fail_list)
        self.fail_stat = set(fail_stat)
        self.incomplete = set(incomplete)
        self.calls: List[Tuple[str, str]] = []

    def _paths(self) -> List[str]:
        return list(self.files) + self.directories

    def _is_dir(self, path: str) -> bool:
        if path == "/" or path in self.directories:
            return True
        prefix = path.rstrip("/") + "/"
        return any(p.startswith(prefix) for p in self._paths())

    def _entry(self, path: str) -> RemoteEntry:
        name = posixpath.basename(path) or path
        if path in self.files:
            size, modified_at = self.files[path]
            if path in self.incomplete:
                size = None
            return RemoteEntry(name=name, path=path, is_directory=False, size=size, modified_at=modified_at)
        if self._is_dir(path):
            return RemoteEntry(name=name, path=path, is_directory=True, size=4096, modified_at=T0)
        raise TransportError(f"no such file: {path}")

    def stat(self, path: str) -> RemoteEntry:
        self.calls.append(("stat", path))
        if path in self.fail_stat:
            raise TransportError(f"permission denied: {path}")
        return self._entry(path)

    def list_directory(self, path: str) -> List[RemoteEntry]:
        self.calls.append(("list", path))
        if path in self.fail_list:
            raise TransportError(f"permission denied: {path}")
        if not self._is_dir(path):
            raise TransportError(f"not a directory: {path}")

        prefix = "/" if path == "/" else path.rstrip("/") + "/"
        names: List[str] = []
        for candidate in self._paths():
            if candidate.startswith(prefix):
                name = candidate[len(prefix):].split("/")[0]
                if name and name not in names:
                    names.append(name)
        return [self._entry(posixpath.join(path, name)) for name in names]


class RecordingSink:
    def __init__(self):
        self.reported = []
        self.closed = False

    def report(self, aggregate) -> None:
        self.reported.append(aggregate)

    def close(self) -> None:
        self.closed = True


def file_paths(entries) -> List[str]:
    return [entry.path for entry in entries]


def find(aggregates, name: str) -> Optional[object]:
    for aggregate in aggregates:
        if aggregate.name == name:
            return aggregate
    return None
