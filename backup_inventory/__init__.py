"""
Backup Inventory - size and freshness report for backups on an SFTP server.

This package walks every top-level backup directory on a remote server, splits
file sizes into mutable and immutable (content-addressed) totals and reports
the most recent modification per backup.
"""

__version__ = "1.0.0"

from .core.inventory import InventoryRunner
from .core.transport import SFTPTransport
from .reporters.text_reporter import TextReporter

__all__ = ["InventoryRunner", "SFTPTransport", "TextReporter"]
