"""MinIO implementation of the StorageBackend interface."""

import io

from file_store_common import StorageReadError, StorageWriteError
from file_store_common.logging import setup_logging
from minio import Minio
from minio.error import S3Error

from infrastructure.names import validate_file_name
from interfaces import StorageBackend

logger = setup_logging()

_MISSING_CODES = ("NoSuchKey", "NoSuchObject")


class MinioStorage(StorageBackend):
    """Stores each file as a top-level object in a MinIO bucket."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    def ensure_bucket_exists(self) -> None:
        """Creates the configured bucket if it does not exist yet."""
        if not self._client.bucket_exists(bucket_name=self._bucket_name):
            self._client.make_bucket(bucket_name=self._bucket_name)
            logger.info("Bucket created", extra={"bucket": self._bucket_name})
        else:
            logger.info("Bucket exists", extra={"bucket": self._bucket_name})

    def exists(self, name: str) -> bool:
        validate_file_name(name)
        try:
            self._client.stat_object(
                bucket_name=self._bucket_name, object_name=name
            )
            return True
        except S3Error as e:
            if e.code in _MISSING_CODES:
                return False
            logger.exception(
                "MinIO stat failed",
                extra={"object_name": name, "bucket": self._bucket_name},
            )
            raise StorageReadError(name, e) from e

    def get(self, name: str) -> bytes:
        validate_file_name(name)
        try:
            response = self._client.get_object(
                bucket_name=self._bucket_name, object_name=name
            )
            try:
                return response.read()
            finally:
                response.close()
                response.release_conn()
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"object_name": name, "bucket": self._bucket_name},
            )
            raise StorageReadError(name, e) from e

    def put(self, name: str, data: bytes) -> None:
        validate_file_name(name)
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=name,
                data=io.BytesIO(data),
                length=len(data),
                content_type="text/plain; charset=utf-8",
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"object_name": name, "bucket": self._bucket_name},
            )
            raise StorageWriteError(name, e) from e
        logger.info(
            "File uploaded to MinIO",
            extra={"object_name": name, "size": len(data), "bucket": self._bucket_name},
        )

    def delete(self, name: str) -> None:
        validate_file_name(name)
        try:
            self._client.remove_object(
                bucket_name=self._bucket_name, object_name=name
            )
        except Exception as e:
            logger.exception(
                "MinIO removal failed",
                extra={"object_name": name, "bucket": self._bucket_name},
            )
            raise StorageWriteError(name, e) from e
        logger.info(
            "File removed from MinIO",
            extra={"object_name": name, "bucket": self._bucket_name},
        )

    def list(self) -> list[str]:
        try:
            objects = self._client.list_objects(bucket_name=self._bucket_name)
            return [obj.object_name for obj in objects if not obj.is_dir]
        except Exception as e:
            logger.exception(
                "MinIO listing failed", extra={"bucket": self._bucket_name}
            )
            raise StorageReadError(self._bucket_name, e) from e
