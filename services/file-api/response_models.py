"""Request and response models for the file-api endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class FileCreateRequest(BaseModel):
    """Body for creating a file."""

    filename: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class FileUpdateRequest(BaseModel):
    """Body for replacing a file's content."""

    content: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    """Outcome of a write or delete operation."""

    mensaje: str


class ContentResponse(BaseModel):
    """Outcome of a read or list operation with its payload."""

    mensaje: str
    contenido: Any = None
