"""Capabilities the inventory pipeline consumes."""

from typing import List, Protocol, runtime_checkable

from .models import BackupAggregate, RemoteEntry


@runtime_checkable
class RemoteLister(Protocol):
    """Read-only view of a remote file tree.

    Both calls raise TransportError when the server cannot answer.
    """

    def stat(self, path: str) -> RemoteEntry:
        ...

    def list_directory(self, path: str) -> List[RemoteEntry]:
        ...


@runtime_checkable
class AggregateSink(Protocol):
    """Receives finished backup aggregates."""

    def report(self, aggregate: BackupAggregate) -> None:
        ...

    def close(self) -> None:
        ...
