import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings

access_logger = logging.getLogger("upload_api.access")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def access_log(logger: logging.Logger = access_logger):
    """Build an HTTP middleware that logs each request and how long it took.

    The response is returned untouched and exceptions from the wrapped
    handler propagate; the duration is logged either way.
    """

    async def log_requests(request: Request, call_next):
        t0 = time.perf_counter()
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        remote = f"{request.client.host}:{request.client.port}" if request.client else "-"
        logger.info("Request received: method=%s uri=%s remote=%s", request.method, uri, remote)
        try:
            return await call_next(request)
        finally:
            dt = (time.perf_counter() - t0) * 1000
            logger.info("Request completed in %.1fms", dt)

    return log_requests


def apply_access_log(app: FastAPI, logger: logging.Logger = access_logger):
    app.middleware("http")(access_log(logger))


def apply_cors(app: FastAPI, origins: list[str] | None = None):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
