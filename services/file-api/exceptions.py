"""Custom exceptions for the file-api service."""


class InvalidFileNameError(Exception):
    """Raised when a file name is not a single safe path segment."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Invalid file name '{file_name}'")


class FileConflictError(Exception):
    """Raised when creating a file whose name is already taken."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"File '{file_name}' already exists")


class FileMissingError(Exception):
    """Raised when a requested file does not exist."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"File '{file_name}' not found")


class UnsupportedContentError(Exception):
    """Raised when content fails the format check of the target store."""

    def __init__(self, file_name: str, content_format: str):
        self.file_name = file_name
        self.content_format = content_format
        super().__init__(f"Content for '{file_name}' is not valid {content_format}")


class MalformedRowError(Exception):
    """Raised when a CSV row cannot be matched against the header."""

    def __init__(
        self,
        line_number: int,
        expected: int | None = None,
        found: int | None = None,
        cause: Exception | None = None,
    ):
        self.line_number = line_number
        self.expected = expected
        self.found = found
        self.cause = cause
        if cause is not None:
            message = f"Line {line_number} could not be tokenized: {cause}"
        else:
            message = f"Line {line_number} has {found} fields, expected {expected}"
        super().__init__(message)
