"""Abstract interfaces for infrastructure dependencies."""

from .storage import StorageBackend

__all__ = ["StorageBackend"]
