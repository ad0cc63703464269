"""File name checks shared by the storage backends."""

from exceptions import InvalidFileNameError

_FORBIDDEN = ("/", "\\", "\x00")


def validate_file_name(name: str) -> str:
    """
    Ensures a name is a single relative path segment.

    Raises:
        InvalidFileNameError: If the name is empty, a dot entry, or contains
            a path separator or NUL byte.
    """
    if not name or name in (".", "..") or any(c in name for c in _FORBIDDEN):
        raise InvalidFileNameError(name)
    return name
