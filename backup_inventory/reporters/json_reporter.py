"""JSON reporter for backup inventory."""

import json
from typing import IO, List, Optional

import click

from ..core.models import BackupAggregate


class JsonReporter:
    """Collects aggregates and writes them as one JSON array on close."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self.stream = stream
        self.aggregates: List[BackupAggregate] = []

    def report(self, aggregate: BackupAggregate) -> None:
        self.aggregates.append(aggregate)

    def close(self) -> None:
        payload = [aggregate.to_dict() for aggregate in self.aggregates]
        click.echo(json.dumps(payload, indent=2), file=self.stream)
