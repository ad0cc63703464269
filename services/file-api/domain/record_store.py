"""Format-aware file stores on top of a storage backend."""

import posixpath
from typing import Any

from file_store_common.logging import setup_logging

from domain.csv_transcoder import parse_csv
from domain.models import CsvRecord
from domain.validators import is_valid_csv, is_valid_json, load_json
from exceptions import FileConflictError, FileMissingError, UnsupportedContentError
from interfaces import StorageBackend

logger = setup_logging()


class RecordStore:
    """
    Lists, creates, reads, updates and deletes files of one format.

    Encapsulates the existence and conflict rules shared by every format.
    Subclasses narrow the listing, validate content before writes and decode
    content on reads. The check-then-write sequences are not atomic; two
    concurrent requests on the same name may both pass the existence check.
    """

    content_format = "text"

    def __init__(self, storage: StorageBackend):
        self._storage = storage

    def list_files(self) -> list[str]:
        """Returns the basenames of stored files accepted by this format."""
        names = [
            posixpath.basename(name)
            for name in self._storage.list()
            if self._is_listed(name)
        ]
        logger.info(
            "Files listed",
            extra={"format": self.content_format, "count": len(names)},
        )
        return names

    def create(self, name: str, content: str) -> None:
        """
        Stores a new file.

        Raises:
            FileConflictError: If a file with this name already exists.
            UnsupportedContentError: If the content fails the format check.
        """
        if self._storage.exists(name):
            logger.warning(
                "File already exists",
                extra={"file_name": name, "format": self.content_format},
            )
            raise FileConflictError(name)

        self._check_content(name, content, self._accepts_new)
        self._storage.put(name, content.encode("utf-8"))
        logger.info(
            "File created", extra={"file_name": name, "format": self.content_format}
        )

    def read(self, name: str) -> Any:
        """
        Returns the decoded content of a stored file.

        Raises:
            FileMissingError: If the file does not exist.
        """
        self._require(name)
        content = self._decode(self._storage.get(name))
        logger.info(
            "File read", extra={"file_name": name, "format": self.content_format}
        )
        return content

    def update(self, name: str, content: str) -> None:
        """
        Replaces the content of an existing file.

        Existence is checked before the content is validated.

        Raises:
            FileMissingError: If the file does not exist.
            UnsupportedContentError: If the content fails the format check.
        """
        self._require(name)
        self._check_content(name, content, self._accepts_update)
        self._storage.put(name, content.encode("utf-8"))
        logger.info(
            "File updated", extra={"file_name": name, "format": self.content_format}
        )

    def delete(self, name: str) -> None:
        """
        Removes a stored file.

        Raises:
            FileMissingError: If the file does not exist.
        """
        self._require(name)
        self._storage.delete(name)
        logger.info(
            "File deleted", extra={"file_name": name, "format": self.content_format}
        )

    def _require(self, name: str) -> None:
        if not self._storage.exists(name):
            logger.warning(
                "File not found",
                extra={"file_name": name, "format": self.content_format},
            )
            raise FileMissingError(name)

    def _check_content(self, name: str, content: str, accepts) -> None:
        if not accepts(content):
            logger.warning(
                "Content rejected",
                extra={"file_name": name, "format": self.content_format},
            )
            raise UnsupportedContentError(name, self.content_format)

    def _is_listed(self, name: str) -> bool:
        return True

    def _accepts_new(self, content: str) -> bool:
        return True

    def _accepts_update(self, content: str) -> bool:
        return True

    def _decode(self, data: bytes) -> Any:
        return data.decode("utf-8", errors="replace")


class TextRecordStore(RecordStore):
    """Stores arbitrary text files and returns them verbatim."""


class CsvRecordStore(RecordStore):
    """
    Stores CSV files and reads them as header-keyed records.

    Updates only require the content to tokenize; column counts are checked
    when the file is read, so a ragged file can be written and fail later.
    """

    content_format = "csv"

    def _is_listed(self, name: str) -> bool:
        return posixpath.splitext(name)[1] == ".csv"

    def _accepts_update(self, content: str) -> bool:
        return is_valid_csv(content)

    def _decode(self, data: bytes) -> list[CsvRecord]:
        return parse_csv(data).rows


class JsonRecordStore(RecordStore):
    """Stores syntactically valid JSON files and reads them decoded."""

    content_format = "json"

    def _is_listed(self, name: str) -> bool:
        return is_valid_json(self._storage.get(name))

    def _accepts_new(self, content: str) -> bool:
        return is_valid_json(content)

    def _accepts_update(self, content: str) -> bool:
        return is_valid_json(content)

    def _decode(self, data: bytes) -> Any:
        try:
            return load_json(data)
        except ValueError:
            logger.warning("Stored content is not valid JSON")
            return None
