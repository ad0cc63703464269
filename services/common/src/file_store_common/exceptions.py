"""Storage-layer exceptions shared by every backend."""


class StorageError(Exception):
    """Base class for storage backend faults."""

    def __init__(self, message: str, name: str, cause: Exception | None = None):
        self.name = name
        self.cause = cause
        super().__init__(message)


class StorageReadError(StorageError):
    """Raised when reading or listing from storage fails."""

    def __init__(self, name: str, cause: Exception | None = None):
        super().__init__(f"Failed to read '{name}' from storage", name, cause)


class StorageWriteError(StorageError):
    """Raised when writing to or deleting from storage fails."""

    def __init__(self, name: str, cause: Exception | None = None):
        super().__init__(f"Failed to write '{name}' to storage", name, cause)
