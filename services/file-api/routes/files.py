"""Generic text file endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_text_store
from domain import TextRecordStore
from exceptions import FileConflictError, FileMissingError
from response_models import (
    ContentResponse,
    FileCreateRequest,
    FileUpdateRequest,
    MessageResponse,
)

router = APIRouter(prefix="/files", tags=["files"])

TextStoreDep = Annotated[TextRecordStore, Depends(get_text_store)]


@router.get("", response_model=ContentResponse)
def list_files(store: TextStoreDep):
    """Lists every stored file."""
    return ContentResponse(mensaje="Listado de ficheros", contenido=store.list_files())


@router.post("", response_model=MessageResponse)
def create_file(body: FileCreateRequest, store: TextStoreDep):
    """Creates a file with the given name and content."""
    try:
        store.create(body.filename, body.content)
    except FileConflictError:
        raise HTTPException(status_code=409, detail="El archivo ya existe")
    return MessageResponse(mensaje="Guardado con éxito")


@router.get("/{filename}", response_model=ContentResponse)
def read_file(filename: str, store: TextStoreDep):
    """Returns the raw content of a file."""
    try:
        content = store.read(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail="Archivo no encontrado")
    return ContentResponse(mensaje="Archivo leído con éxito", contenido=content)


@router.put("/{filename}", response_model=MessageResponse)
def update_file(filename: str, body: FileUpdateRequest, store: TextStoreDep):
    """Replaces the content of an existing file."""
    try:
        store.update(filename, body.content)
    except FileMissingError:
        raise HTTPException(status_code=404, detail="El archivo no existe")
    return MessageResponse(mensaje="Actualizado con éxito")


@router.delete("/{filename}", response_model=MessageResponse)
def delete_file(filename: str, store: TextStoreDep):
    """Deletes a file."""
    try:
        store.delete(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail="El archivo no existe")
    return MessageResponse(mensaje="Eliminado con éxito")
