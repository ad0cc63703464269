"""Concrete implementations of infrastructure interfaces."""

from .local_storage import LocalFileStorage
from .minio_storage import MinioStorage

__all__ = ["LocalFileStorage", "MinioStorage"]
