from fastapi import APIRouter, Depends, Request

from ..config import Settings
from ..deps import get_settings
from ..models import ErrorResponse, UploadResponse
from ..responses import json_success
from ..services.storage import save_upload
from ..services.validator import validate_upload

router = APIRouter(tags=["files"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_file(request: Request, settings: Settings = Depends(get_settings)):
    """Accept one multipart part named ``file`` and store it under its own name."""
    upload = await validate_upload(request, settings)
    try:
        stored = await save_upload(settings.upload_dir, upload)
    finally:
        await upload.close()
    return json_success(stored)
