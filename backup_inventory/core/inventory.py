"""Inventory of all backups on a remote server."""

import logging
from typing import List, Optional

from ..errors import RootListingError, TransportError
from .aggregator import BackupAggregator
from .models import BackupAggregate, BackupRoot, ErrorPolicy, StepError
from .protocols import AggregateSink, RemoteLister
from .walker import TreeWalker, join_remote


class InventoryRunner:
    """Main inventory coordinator."""

    def __init__(self, lister: RemoteLister, root_path: str = "/", exclude_patterns: Optional[List[str]] = None,
                 error_policy: ErrorPolicy = ErrorPolicy.SKIP):
        """Initialize inventory runner.

        Args:
            lister: Remote listing capability (see TreeWalker).
            root_path: Remote directory whose entries are the backups.
            exclude_patterns: Entry name prefixes to leave out.
            error_policy: Policy for failed traversal steps.
        """
        self.lister = lister
        self.root_path = root_path
        self.exclude_patterns = exclude_patterns or []
        self.error_policy = error_policy
        self.walker = TreeWalker(lister, error_policy=error_policy)
        self.logger = logging.getLogger(__name__)

    def discover_roots(self) -> List[BackupRoot]:
        """List the backup roots under the remote root path.

        Returns:
            One BackupRoot per top-level entry, in listing order.

        Raises:
            RootListingError: If the remote root cannot be listed.
        """
        try:
            entries = self.lister.list_directory(self.root_path)
        except TransportError as e:
            raise RootListingError(f"Cannot list backups in {self.root_path}: {e}") from e

        roots = []
        for entry in entries:
            name = entry.name[1:] if entry.name.startswith("/") else entry.name
            if self._is_excluded(name):
                self.logger.debug(f"Excluding {name}")
                continue
            roots.append(BackupRoot(name=name, path=join_remote(self.root_path, name)))

        return roots

    def _is_excluded(self, name: str) -> bool:
        """Check if a top-level entry should be excluded."""
        for pattern in self.exclude_patterns:
            if name.startswith(pattern):
                return True
        return False

    def inventory_root(self, root: BackupRoot) -> BackupAggregate:
        """Walk and aggregate a single backup root."""
        skipped: List[StepError] = []
        aggregator = BackupAggregator(root)
        aggregator.consume(self.walker.walk(root.path, skipped=skipped))

        result = aggregator.result()
        result.skipped_paths.extend(error.path for error in skipped)
        return result

    def run(self) -> List[BackupAggregate]:
        """Inventory every backup root.

        Returns:
            Aggregates in the order the roots were listed.
        """
        roots = self.discover_roots()
        self.logger.info(f"Starting inventory of {len(roots)} backups in {self.root_path}")

        results = []
        for root in roots:
            self.logger.info(f"Walking backup: {root.name}")
            result = self.inventory_root(root)
            self.logger.info(f"Finished {root.name}: {result.file_count} files, {result.total_bytes} bytes")
            results.append(result)

        return results

    def run_and_report(self, sink: AggregateSink) -> List[BackupAggregate]:
        """Run the inventory and hand each aggregate to a reporting sink.

        Nothing reaches the sink if the run fails.
        """
        results = self.run()
        for result in results:
            sink.report(result)
        sink.close()
        return results
