"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from file_store_common import StorageError
from file_store_common.logging import setup_logging
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import load_config
from exceptions import InvalidFileNameError
from routes import csv_router, files_router, json_router

logger = setup_logging(load_config().log_level)
patch_all()

app = FastAPI(title="File Record Store")
app.include_router(files_router)
app.include_router(csv_router)
app.include_router(json_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Returns HTTP errors as {"mensaje": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"mensaje": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reports missing or mistyped request fields as a 422."""
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=422,
        content={
            "mensaje": "Parámetros de entrada no válidos",
            "errores": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(InvalidFileNameError)
async def invalid_file_name_handler(request: Request, exc: InvalidFileNameError):
    logger.warning("Invalid file name", extra={"file_name": exc.file_name})
    return JSONResponse(status_code=422, content={"mensaje": "Nombre de fichero no válido"})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(
        "Storage error",
        extra={"path": request.url.path, "file_name": exc.name, "error": str(exc)},
    )
    return JSONResponse(status_code=500, content={"mensaje": "Error interno del servidor"})
