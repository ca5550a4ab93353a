"""Error types raised by the vault store."""


class VaultError(Exception):
    """Opaque store failure carrying a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message or "vault operation failed")
        self.message = str(self)


class StartupError(VaultError):
    """Data directory or database file could not be prepared."""
    pass


class ConflictError(VaultError):
    """A record with the same id already exists."""
    pass


class QueryError(VaultError):
    """Unexpected database-layer failure."""
    pass
