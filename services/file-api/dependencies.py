"""FastAPI dependency injection configuration."""

from typing import Annotated

from fastapi import Depends
from file_store_common.logging import setup_logging
from minio import Minio

from config import AppConfig, load_config
from domain import CsvRecordStore, JsonRecordStore, TextRecordStore
from infrastructure import LocalFileStorage, MinioStorage
from interfaces import StorageBackend

logger = setup_logging()

_config = load_config()


def build_storage(config: AppConfig) -> StorageBackend:
    """Creates the storage backend selected by the configuration."""
    if config.storage.backend == "minio":
        minio_config = config.storage.minio
        client = Minio(
            endpoint=minio_config.endpoint,
            access_key=minio_config.user,
            secret_key=minio_config.password,
            secure=minio_config.secure,
        )
        storage = MinioStorage(client, minio_config.bucket_name)
        storage.ensure_bucket_exists()
        logger.info(
            "Using MinIO storage",
            extra={"endpoint": minio_config.endpoint, "bucket": minio_config.bucket_name},
        )
        return storage

    storage = LocalFileStorage(config.storage.local.root)
    logger.info("Using local storage", extra={"root": storage.root})
    return storage


_storage = build_storage(_config)


def get_storage() -> StorageBackend:
    """Returns the configured storage backend."""
    return _storage


StorageDep = Annotated[StorageBackend, Depends(get_storage)]


def get_text_store(storage: StorageDep) -> TextRecordStore:
    """Returns the store for generic text files."""
    return TextRecordStore(storage)


def get_csv_store(storage: StorageDep) -> CsvRecordStore:
    """Returns the store for CSV files."""
    return CsvRecordStore(storage)


def get_json_store(storage: StorageDep) -> JsonRecordStore:
    """Returns the store for JSON files."""
    return JsonRecordStore(storage)
