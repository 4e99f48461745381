"""Exceptions raised by backup inventory."""


class InventoryError(RuntimeError):
    """Base exception for inventory failures."""


class TransportError(InventoryError):
    """Raised when a remote listing or stat call fails."""


class ConnectionFailedError(TransportError):
    """Raised when the SFTP session cannot be established."""


class RootListingError(InventoryError):
    """Raised when the top-level backup directories cannot be listed."""
