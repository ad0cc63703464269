"""JSON file endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_json_store
from domain import JsonRecordStore
from exceptions import FileConflictError, FileMissingError, UnsupportedContentError
from response_models import (
    ContentResponse,
    FileCreateRequest,
    FileUpdateRequest,
    MessageResponse,
)

router = APIRouter(prefix="/json", tags=["json"])

JsonStoreDep = Annotated[JsonRecordStore, Depends(get_json_store)]

NOT_FOUND = "El fichero no existe"
INVALID_JSON = "Contenido no es un JSON válido"


@router.get("", response_model=ContentResponse)
def list_json_files(store: JsonStoreDep):
    """Lists stored files whose content is valid JSON, whatever their name."""
    return ContentResponse(mensaje="Operación exitosa", contenido=store.list_files())


@router.post("", response_model=MessageResponse)
def create_json_file(body: FileCreateRequest, store: JsonStoreDep):
    """Creates a JSON file if the name is free and the content parses."""
    try:
        store.create(body.filename, body.content)
    except FileConflictError:
        raise HTTPException(status_code=409, detail="El fichero ya existe")
    except UnsupportedContentError:
        raise HTTPException(status_code=415, detail=INVALID_JSON)
    return MessageResponse(mensaje="Fichero guardado exitosamente")


@router.get("/{filename}", response_model=ContentResponse)
def read_json_file(filename: str, store: JsonStoreDep):
    """Returns the decoded content of a JSON file."""
    try:
        content = store.read(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return ContentResponse(mensaje="Operación exitosa", contenido=content)


@router.put("/{filename}", response_model=MessageResponse)
def update_json_file(filename: str, body: FileUpdateRequest, store: JsonStoreDep):
    """Replaces a JSON file if it exists and the new content parses."""
    try:
        store.update(filename, body.content)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except UnsupportedContentError:
        raise HTTPException(status_code=415, detail=INVALID_JSON)
    return MessageResponse(mensaje="Fichero actualizado exitosamente")


@router.delete("/{filename}", response_model=MessageResponse)
def delete_json_file(filename: str, store: JsonStoreDep):
    """Deletes a JSON file."""
    try:
        store.delete(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MessageResponse(mensaje="Fichero eliminado exitosamente")
