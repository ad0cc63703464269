from file_store_common.config import LocalStorageConfig, MinioConfig
from file_store_common.exceptions import (
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from file_store_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "LocalStorageConfig",
    "MinioConfig",
]
