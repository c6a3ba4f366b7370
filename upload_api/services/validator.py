"""Upload request validation.

Checks run in a fixed order and stop at the first failure:
method, body size, presence of the file part, extension, filename safety.
Nothing touches the filesystem here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from ..config import Settings
from ..exceptions import (
    DisallowedExtensionError,
    MethodNotAllowedError,
    MissingFilePartError,
    PayloadTooLargeError,
    UnsafeFilenameError,
    UploadError,
)
from .allowlist import Allowlist, extension_of


@dataclass
class ValidatedUpload:
    filename: str
    file: UploadFile
    declared_size: Optional[int]
    form: Optional[FormData] = None

    async def close(self) -> None:
        if self.form is not None:
            await self.form.close()
        else:
            await self.file.close()


def _replay(body: bytes):
    sent = False

    async def receive():
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return receive


async def read_limited_body(request: Request, settings: Settings) -> Request:
    """Buffer the request body, failing once it grows past the upload ceiling.

    Returns a new Request over the same scope that replays the buffered body,
    so the form parser never sees more than the ceiling.
    """
    limit = settings.max_upload_size
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(settings.max_upload_mb)

    chunks = []
    total = 0
    async for chunk in request.stream():
        total += len(chunk)
        if total > limit:
            raise PayloadTooLargeError(settings.max_upload_mb)
        chunks.append(chunk)
    return Request(request.scope, _replay(b"".join(chunks)))


def check_filename(filename: str) -> None:
    if filename in (".", "..") or any(c in filename for c in ("/", "\\", "\x00")):
        raise UnsafeFilenameError()


async def validate_upload(request: Request, settings: Settings, method: str = "POST") -> ValidatedUpload:
    if request.method != method:
        raise MethodNotAllowedError()

    buffered = await read_limited_body(request, settings)

    try:
        form = await buffered.form()
    except (HTTPException, MultiPartException, ValueError):
        # ValueError covers parse errors raised by python-multipart itself
        raise MissingFilePartError() from None

    part = form.get(settings.field_name)
    if not isinstance(part, UploadFile) or not part.filename:
        await form.close()
        raise MissingFilePartError()

    try:
        allowlist = Allowlist(settings.allowed_extensions)
        ext = extension_of(part.filename)
        if not allowlist.permits(ext):
            raise DisallowedExtensionError(ext, allowlist.sorted())
        check_filename(part.filename)
    except UploadError:
        await form.close()
        raise

    return ValidatedUpload(
        filename=part.filename,
        file=part,
        declared_size=getattr(part, "size", None),
        form=form,
    )
