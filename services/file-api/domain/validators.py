"""Syntactic format checks for stored content."""

import csv
import io
import json


def _as_text(content: str | bytes) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8")
    return content


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON constant {token}")


def load_json(content: str | bytes):
    """
    Parses JSON under the strict grammar.

    Raises:
        ValueError: If the content is not UTF-8, not valid JSON, or nested
            deeper than the decoder can recurse. The NaN/Infinity literals
            Python accepts by default are rejected.
    """
    try:
        return json.loads(_as_text(content), parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("JSON nesting is too deep to decode") from e


def is_valid_json(content: str | bytes) -> bool:
    """Returns True iff the whole content parses as a JSON value."""
    try:
        load_json(content)
    except ValueError:
        return False
    return True


def is_valid_csv(content: str | bytes) -> bool:
    """
    Returns True iff the content tokenizes as CSV without a quoting error.

    Rows with differing field counts are still lexically valid; that mismatch
    is only detected when the file is parsed for reading.
    """
    try:
        for _ in csv.reader(io.StringIO(_as_text(content)), strict=True):
            pass
    except (csv.Error, UnicodeDecodeError):
        return False
    return True
