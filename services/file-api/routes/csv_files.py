"""CSV file endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from file_store_common.logging import setup_logging

from dependencies import get_csv_store
from domain import CsvRecordStore
from exceptions import (
    FileConflictError,
    FileMissingError,
    MalformedRowError,
    UnsupportedContentError,
)
from response_models import (
    ContentResponse,
    FileCreateRequest,
    FileUpdateRequest,
    MessageResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/csv", tags=["csv"])

CsvStoreDep = Annotated[CsvRecordStore, Depends(get_csv_store)]

NOT_FOUND = "El fichero no existe"


@router.get("", response_model=ContentResponse)
def list_csv_files(store: CsvStoreDep):
    """Lists stored files with a .csv extension."""
    return ContentResponse(mensaje="Listado de ficheros", contenido=store.list_files())


@router.post("", response_model=MessageResponse)
def create_csv_file(body: FileCreateRequest, store: CsvStoreDep):
    """Creates a CSV file. Content is stored as sent."""
    try:
        store.create(body.filename, body.content)
    except FileConflictError:
        raise HTTPException(status_code=409, detail="El fichero ya existe")
    return MessageResponse(mensaje="Guardado con éxito")


@router.get("/{filename}", response_model=ContentResponse)
def read_csv_file(filename: str, store: CsvStoreDep):
    """
    Returns a CSV file as a list of records keyed by the header fields.

    A row whose field count does not match the header yields a 400 with
    empty content.
    """
    try:
        records = store.read(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except MalformedRowError as e:
        logger.warning(
            "CSV file could not be parsed",
            extra={"file_name": filename, "error": str(e)},
        )
        return JSONResponse(
            status_code=400,
            content={
                "mensaje": "Error al procesar el archivo CSV. Revisa su formato.",
                "contenido": [],
            },
        )
    return ContentResponse(mensaje="Fichero leído con éxito", contenido=records)


@router.put("/{filename}", response_model=MessageResponse)
def update_csv_file(filename: str, body: FileUpdateRequest, store: CsvStoreDep):
    """Replaces a CSV file after checking that the content tokenizes."""
    try:
        store.update(filename, body.content)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except UnsupportedContentError:
        raise HTTPException(status_code=415, detail="Formato de CSV no válido")
    return MessageResponse(mensaje="Fichero actualizado exitosamente")


@router.delete("/{filename}", response_model=MessageResponse)
def delete_csv_file(filename: str, store: CsvStoreDep):
    """Deletes a CSV file."""
    try:
        store.delete(filename)
    except FileMissingError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MessageResponse(mensaje="Fichero eliminado exitosamente")
