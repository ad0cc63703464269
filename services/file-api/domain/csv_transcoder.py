"""Conversion between CSV text and header-keyed records."""

import csv

from file_store_common.logging import setup_logging

from domain.models import CsvDocument, CsvRecord
from exceptions import MalformedRowError

logger = setup_logging()


def _tokenize(line: str, line_number: int) -> list[str]:
    """Splits one line into fields, honouring double-quoted cells."""
    try:
        return next(csv.reader([line], strict=True), [])
    except csv.Error as e:
        raise MalformedRowError(line_number, cause=e) from e


def parse_csv(content: str | bytes) -> CsvDocument:
    """
    Parses CSV content into a header and one record per data line.

    Lines are split on newlines before tokenizing, so quoted cells cannot
    span lines. Empty content yields an empty document and a header-only
    file yields no rows. When a header name repeats, the right-most column
    wins.

    Args:
        content: Raw file content, UTF-8 encoded when given as bytes.

    Returns:
        CsvDocument with the header fields and the rows in file order.

    Raises:
        MalformedRowError: If a line cannot be tokenized or its field count
            differs from the header's. No partial document is returned.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    text = content.strip()
    if not text:
        return CsvDocument()

    lines = text.split("\n")
    header = _tokenize(lines[0], 1)

    rows: list[CsvRecord] = []
    for line_number, line in enumerate(lines[1:], start=2):
        cells = _tokenize(line, line_number)
        if len(cells) != len(header):
            logger.warning(
                "CSV row does not match header",
                extra={
                    "line_number": line_number,
                    "expected": len(header),
                    "found": len(cells),
                },
            )
            raise MalformedRowError(line_number, len(header), len(cells))
        rows.append(dict(zip(header, cells)))

    return CsvDocument(header=header, rows=rows)
