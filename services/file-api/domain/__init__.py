"""Domain layer exports."""

from domain.csv_transcoder import parse_csv
from domain.models import CsvDocument, CsvRecord
from domain.record_store import (
    CsvRecordStore,
    JsonRecordStore,
    RecordStore,
    TextRecordStore,
)
from domain.validators import is_valid_csv, is_valid_json, load_json

__all__ = [
    "CsvDocument",
    "CsvRecord",
    "CsvRecordStore",
    "JsonRecordStore",
    "RecordStore",
    "TextRecordStore",
    "is_valid_csv",
    "is_valid_json",
    "load_json",
    "parse_csv",
]
