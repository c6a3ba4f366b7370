from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import deps
from .config import APP_VERSION, Settings, load_settings
from .exceptions import UploadError
from .responses import json_error, plain_error
from .routers import files, status, upload


def create_plain_app(settings: Settings | None = None) -> FastAPI:
    """Single POST /upload route answering in plain text, with access logging."""
    app = FastAPI(title="Upload API (plain)", version=APP_VERSION)
    app.state.settings = settings or load_settings("plain")
    deps.apply_access_log(app)

    @app.exception_handler(UploadError)
    async def upload_error(request: Request, exc: UploadError):
        return plain_error(exc)

    app.include_router(upload.router)
    return app


def create_api_app(settings: Settings | None = None) -> FastAPI:
    """JSON variant: POST /upload, GET / status and GET /favicon.ico."""
    app = FastAPI(title="Upload API", version=APP_VERSION)
    app.state.settings = settings or load_settings("api")
    deps.apply_cors(app)
    deps.apply_access_log(app)

    @app.exception_handler(UploadError)
    async def upload_error(request: Request, exc: UploadError):
        return json_error(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return json_error(detail, exc.status_code)

    app.include_router(status.router)
    app.include_router(files.router)
    return app


# plain variant: uvicorn --factory upload_api.main:create_plain_app
app = create_api_app()
