from fastapi import APIRouter, Depends, Response

from ..config import Settings
from ..deps import get_settings
from ..models import StatusReport
from ..services.status import build_status

router = APIRouter(tags=["status"])


@router.get("/", response_model=StatusReport, include_in_schema=False)
def status(settings: Settings = Depends(get_settings)):
    return build_status(settings)


@router.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)
