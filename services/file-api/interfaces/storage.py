"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract base class for byte-oriented file storage backends."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """
        Checks whether a file is stored under the given name.

        Raises:
            InvalidFileNameError: If the name is not a safe path segment.
        """

    @abstractmethod
    def get(self, name: str) -> bytes:
        """
        Reads a stored file.

        Args:
            name: The file name.

        Returns:
            The file contents as bytes.

        Raises:
            StorageReadError: If the read fails.
        """

    @abstractmethod
    def put(self, name: str, data: bytes) -> None:
        """
        Writes a file, replacing any previous content under the same name.

        Args:
            name: The file name.
            data: The full file contents.

        Raises:
            StorageWriteError: If the write fails.
        """

    @abstractmethod
    def delete(self, name: str) -> None:
        """
        Removes a stored file.

        Raises:
            StorageWriteError: If the removal fails.
        """

    @abstractmethod
    def list(self) -> list[str]:
        """
        Lists stored file names in backend order.

        Raises:
            StorageReadError: If the listing fails.
        """
