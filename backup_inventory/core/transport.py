"""SFTP access to the remote backup server."""

import logging
import posixpath
import stat
from datetime import datetime, timezone
from typing import List, Optional

import paramiko

from ..config.config_manager import ConnectionConfig
from ..errors import ConnectionFailedError, TransportError
from .models import RemoteEntry
from .walker import join_remote


class SFTPTransport:
    """Lists and stats remote paths over an SFTP session."""

    def __init__(self, config: ConnectionConfig):
        """Initialize SFTP transport.

        Args:
            config: Host, credentials and timeout for the session.
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self._ssh: Optional[paramiko.SSHClient] = None
        self._sftp: Optional[paramiko.SFTPClient] = None

    def connect(self) -> "SFTPTransport":
        """Open the SSH connection and the SFTP channel.

        Raises:
            ConnectionFailedError: If authentication or connection fails.
        """
        ssh = paramiko.SSHClient()
        ssh.set_missing_host_key_policy(paramiko.AutoAddPolicy())

        try:
            ssh.connect(
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.user,
                password=self.config.password,
                timeout=self.config.timeout_seconds,
                allow_agent=False,
                look_for_keys=False
            )
            self._sftp = ssh.open_sftp()
        except (paramiko.SSHException, OSError) as e:
            ssh.close()
            raise ConnectionFailedError(
                f"Could not connect to {self.config.user}@{self.config.host}:{self.config.port}: {e}"
            ) from e

        self._ssh = ssh
        self.logger.info("Successfully connected to ssh server.")
        return self

    def close(self) -> None:
        if self._sftp is not None:
            self._sftp.close()
            self._sftp = None
        if self._ssh is not None:
            self._ssh.close()
            self._ssh = None

    def __enter__(self) -> "SFTPTransport":
        return self.connect()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def sftp(self) -> paramiko.SFTPClient:
        if self._sftp is None:
            raise TransportError("SFTP session is not connected")
        return self._sftp

    def list_directory(self, path: str) -> List[RemoteEntry]:
        """List the entries of a remote directory.

        Raises:
            TransportError: If the directory cannot be read.
        """
        try:
            attrs = self.sftp.listdir_attr(path)
        except (paramiko.SSHException, OSError) as e:
            raise TransportError(f"Cannot list {path}: {e}") from e

        return [_to_entry(a.filename, join_remote(path, a.filename), a) for a in attrs]

    def stat(self, path: str) -> RemoteEntry:
        """Stat a remote path without following symlinks.

        Raises:
            TransportError: If the path cannot be stat'ed.
        """
        try:
            attr = self.sftp.lstat(path)
        except (paramiko.SSHException, OSError) as e:
            raise TransportError(f"Cannot stat {path}: {e}") from e

        return _to_entry(posixpath.basename(path.rstrip("/")) or path, path, attr)


def _to_entry(name: str, path: str, attr: paramiko.SFTPAttributes) -> RemoteEntry:
    """Convert SFTP attributes to a RemoteEntry."""
    is_directory = attr.st_mode is not None and stat.S_ISDIR(attr.st_mode)
    modified_at = None
    if attr.st_mtime is not None:
        modified_at = datetime.fromtimestamp(attr.st_mtime, tz=timezone.utc)

    return RemoteEntry(
        name=name,
        path=path,
        is_directory=is_directory,
        size=attr.st_size,
        modified_at=modified_at
    )
