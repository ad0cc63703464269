"""Shared configuration models for storage backends."""

from pydantic import BaseModel


class LocalStorageConfig(BaseModel, frozen=True):
    """Directory-backed storage configuration."""

    root: str = "storage/app"


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "files"
    secure: bool = False
