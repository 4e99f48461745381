"""Line-per-backup text reporter."""

import logging
from typing import IO, Optional

import click

from ..core.models import BackupAggregate
from ..utils.formatters import format_file_size, format_timestamp


class TextReporter:
    """Writes one summary line per backup."""

    def __init__(self, stream: Optional[IO[str]] = None, human_readable: bool = False):
        """Initialize text reporter.

        Args:
            stream: Output stream. Defaults to stdout.
            human_readable: Show byte totals as KB/MB/GB instead of raw bytes.
        """
        self.stream = stream
        self.human_readable = human_readable
        self.logger = logging.getLogger(__name__)

    def format_line(self, aggregate: BackupAggregate) -> str:
        """Render the summary line for one backup."""
        if self.human_readable:
            mutable = format_file_size(aggregate.mutable_bytes)
            immutable = format_file_size(aggregate.immutable_bytes)
        else:
            mutable = f"{aggregate.mutable_bytes} bytes"
            immutable = f"{aggregate.immutable_bytes} bytes"

        return (
            f"{aggregate.name} ({aggregate.file_count} files), "
            f"{mutable} (mutable), {immutable} (immutable), "
            f"last modified {format_timestamp(aggregate.last_modified)}"
        )

    def report(self, aggregate: BackupAggregate) -> None:
        click.echo(self.format_line(aggregate), file=self.stream)
        for path in aggregate.skipped_paths:
            click.echo(f"  skipped: {path}", file=self.stream)

    def close(self) -> None:
        self.logger.debug("Text report complete")
