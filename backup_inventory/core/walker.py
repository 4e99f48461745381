"""Remote directory tree traversal for backup inventory."""

import logging
import posixpath
from typing import Iterator, List, Optional

from ..errors import TransportError
from .models import ErrorPolicy, FileEntry, RemoteEntry, StepError, WalkStep
from .protocols import RemoteLister


class TreeWalker:
    """Walks a remote directory tree depth-first."""

    def __init__(self, lister: RemoteLister, error_policy: ErrorPolicy = ErrorPolicy.SKIP):
        """Initialize tree walker.

        Args:
            lister: Object providing stat(path) and list_directory(path),
                    both raising TransportError on failure.
            error_policy: Whether failed steps are only skipped or also
                          collected for the caller.
        """
        self.lister = lister
        self.error_policy = error_policy
        self.logger = logging.getLogger(__name__)

    def steps(self, root_path: str) -> Iterator[WalkStep]:
        """Traverse the tree below root_path, one step per node.

        Directories are reported as well as files. A failed step is reported
        as an error step and the traversal moves on to the next node.

        Args:
            root_path: Remote path to start from.

        Yields:
            WalkStep for every node visited, in pre-order.
        """
        try:
            root = self.lister.stat(root_path)
        except TransportError as e:
            yield WalkStep(path=root_path, error=StepError(root_path, str(e)))
            return

        stack: List[RemoteEntry] = [root]
        while stack:
            node = stack.pop()

            if not node.is_directory and (node.size is None or node.modified_at is None):
                yield WalkStep(path=node.path, error=StepError(node.path, "missing file attributes"))
                continue

            yield WalkStep(path=node.path, entry=node)

            if not node.is_directory:
                continue

            try:
                children = self.lister.list_directory(node.path)
            except TransportError as e:
                yield WalkStep(path=node.path, error=StepError(node.path, str(e)))
                continue

            # Reversed so the stack pops children in name order
            children = sorted(children, key=lambda child: child.name, reverse=True)
            stack.extend(children)

    def walk(self, root_path: str, skipped: Optional[List[StepError]] = None) -> Iterator[FileEntry]:
        """Yield every readable file below root_path.

        Args:
            root_path: Remote path to start from.
            skipped: Receives failed steps when the policy is COLLECT.

        Yields:
            FileEntry for each non-directory node.
        """
        for step in self.steps(root_path):
            if not step.ok:
                self.logger.debug(f"Skipping {step.path}: {step.error.reason}")
                if self.error_policy is ErrorPolicy.COLLECT and skipped is not None:
                    skipped.append(step.error)
                continue

            entry = step.entry
            if entry.is_directory:
                continue

            yield FileEntry(path=entry.path, size=entry.size, modified_at=entry.modified_at)


def join_remote(base: str, name: str) -> str:
    """Join a remote directory and an entry name with '/' separators."""
    return posixpath.join(base, name)
