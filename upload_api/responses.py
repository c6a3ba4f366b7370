"""Renders upload outcomes for the two app variants."""

from fastapi.responses import JSONResponse, PlainTextResponse

from .exceptions import UploadError
from .models import ErrorResponse, UploadResponse
from .services.storage import StoredFile

SUCCESS_MESSAGE = "Upload do arquivo realizado com sucesso!"


def plain_success(stored: StoredFile) -> PlainTextResponse:
    return PlainTextResponse(f"Upload do arquivo '{stored.filename}' realizado com sucesso!")


def plain_error(exc: UploadError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def json_success(stored: StoredFile) -> UploadResponse:
    return UploadResponse(message=SUCCESS_MESSAGE, filename=stored.filename, size_bytes=stored.size_bytes)


def json_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)
