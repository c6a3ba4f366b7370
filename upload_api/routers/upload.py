from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..deps import get_settings
from ..responses import plain_success
from ..services.storage import save_upload
from ..services.validator import validate_upload

router = APIRouter(tags=["upload"])

# Every method is routed here so the validator, not the framework, answers 405.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/upload", methods=ALL_METHODS, response_class=PlainTextResponse)
async def upload_file(request: Request, settings: Settings = Depends(get_settings)):
    upload = await validate_upload(request, settings)
    try:
        stored = await save_upload(settings.upload_dir, upload)
    finally:
        await upload.close()
    return plain_success(stored)
