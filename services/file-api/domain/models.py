"""Domain models for stored file content."""

from pydantic import BaseModel, Field

CsvRecord = dict[str, str]


class CsvDocument(BaseModel):
    """A CSV file parsed into its header and header-keyed rows."""

    header: list[str] = Field(default_factory=list)
    rows: list[CsvRecord] = Field(default_factory=list)
