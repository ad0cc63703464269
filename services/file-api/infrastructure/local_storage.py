"""Directory-backed implementation of the StorageBackend interface."""

import os

from file_store_common import StorageReadError, StorageWriteError
from file_store_common.logging import setup_logging

from infrastructure.names import validate_file_name
from interfaces import StorageBackend

logger = setup_logging()


class LocalFileStorage(StorageBackend):
    """Stores each file directly under a single root directory."""

    def __init__(self, root: str):
        self._root = os.path.abspath(root)
        os.makedirs(self._root, exist_ok=True)

    @property
    def root(self) -> str:
        return self._root

    def _path(self, name: str) -> str:
        """Resolves a file name inside the root, rejecting traversal attempts."""
        return os.path.join(self._root, validate_file_name(name))

    def exists(self, name: str) -> bool:
        return os.path.isfile(self._path(name))

    def get(self, name: str) -> bytes:
        path = self._path(name)
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.exception("File read failed", extra={"file_name": name})
            raise StorageReadError(name, e) from e

    def put(self, name: str, data: bytes) -> None:
        path = self._path(name)
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.exception("File write failed", extra={"file_name": name})
            raise StorageWriteError(name, e) from e
        logger.info(
            "File written to disk",
            extra={"file_name": name, "size": len(data), "root": self._root},
        )

    def delete(self, name: str) -> None:
        path = self._path(name)
        try:
            os.remove(path)
        except OSError as e:
            logger.exception("File removal failed", extra={"file_name": name})
            raise StorageWriteError(name, e) from e
        logger.info("File removed from disk", extra={"file_name": name})

    def list(self) -> list[str]:
        try:
            entries = os.listdir(self._root)
        except OSError as e:
            logger.exception("Directory listing failed", extra={"root": self._root})
            raise StorageReadError(self._root, e) from e
        return [
            entry
            for entry in entries
            if os.path.isfile(os.path.join(self._root, entry))
        ]
