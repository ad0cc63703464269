"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from file_store_common import LocalStorageConfig, MinioConfig
from pydantic import BaseModel, model_validator


class StorageConfig(BaseModel, frozen=True):
    """Selects the storage backend and carries its settings."""

    backend: Literal["local", "minio"] = "local"
    local: LocalStorageConfig = LocalStorageConfig()
    minio: MinioConfig | None = None

    @model_validator(mode="after")
    def _require_minio_settings(self) -> "StorageConfig":
        if self.backend == "minio" and self.minio is None:
            raise ValueError("MinIO settings are required for the minio backend")
        return self


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    storage: StorageConfig
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    backend = os.getenv("STORAGE_BACKEND", "local").strip().lower()

    minio = None
    if backend == "minio":
        minio = MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "files"),
            secure=_env_flag("MINIO_SECURE"),
        )

    return AppConfig(
        storage=StorageConfig(
            backend=backend,
            local=LocalStorageConfig(root=os.getenv("FILES_DIR", "storage/app")),
            minio=minio,
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )
