"""Writes validated uploads into the upload directory.

Content is streamed to a temp file next to the destination and then moved
into place with os.replace(), so a failed write never leaves a partial file
under the client's filename. Same-name uploads overwrite; last writer wins.
"""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from typing import BinaryIO

from starlette.concurrency import run_in_threadpool

from ..exceptions import DirectoryCreationError, FileWriteError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1_048_576  # 1 MiB
TMP_PREFIX = ".tmp-"


@dataclass(frozen=True)
class StoredFile:
    path: str
    filename: str
    size_bytes: int


def ensure_upload_dir(upload_dir: str) -> None:
    """Create the upload directory and any missing parents (idempotent)."""
    try:
        os.makedirs(upload_dir, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create upload directory %s: %s", upload_dir, exc)
        raise DirectoryCreationError() from exc


def safe_unlink(path: str) -> None:
    """Best-effort file removal (no exception if it fails)."""
    try:
        os.remove(path)
    except OSError:
        pass


def _copy(source: BinaryIO, out: BinaryIO, chunk_size: int) -> int:
    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        out.write(chunk)
        written += len(chunk)
    return written


def persist(upload_dir: str, filename: str, source: BinaryIO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> StoredFile:
    """Store ``source`` as ``<upload_dir>/<filename>``.

    Raises:
        DirectoryCreationError: the upload directory could not be created.
        FileWriteError: the temp file could not be opened, written or moved.
    """
    ensure_upload_dir(upload_dir)

    dest = os.path.join(upload_dir, filename)
    tmp_path = os.path.join(upload_dir, f"{TMP_PREFIX}{uuid.uuid4().hex}")

    try:
        out = open(tmp_path, "wb")
    except OSError as exc:
        logger.error("Could not open %s for writing: %s", tmp_path, exc)
        raise FileWriteError() from exc

    try:
        with out:
            size = _copy(source, out, chunk_size)
    except OSError as exc:
        logger.error("Copy into %s failed: %s", tmp_path, exc)
        safe_unlink(tmp_path)
        raise FileWriteError("Erro ao copiar o conteúdo do arquivo.") from exc

    try:
        os.replace(tmp_path, dest)
    except OSError as exc:
        logger.error("Could not move upload into %s: %s", dest, exc)
        safe_unlink(tmp_path)
        raise FileWriteError() from exc

    logger.info("Stored %s (%d bytes)", dest, size)
    return StoredFile(path=dest, filename=filename, size_bytes=size)


def persist_upload(upload_dir: str, upload) -> StoredFile:
    """Persist a ValidatedUpload, rewinding its spooled file first."""
    source = upload.file.file
    source.seek(0)
    stored = persist(upload_dir, upload.filename, source)
    if upload.declared_size is not None and upload.declared_size != stored.size_bytes:
        logger.warning(
            "Size mismatch for %s: part declared %d bytes, wrote %d",
            upload.filename,
            upload.declared_size,
            stored.size_bytes,
        )
    return stored


async def save_upload(upload_dir: str, upload) -> StoredFile:
    """Run persist_upload in the threadpool so the event loop keeps serving requests."""
    return await run_in_threadpool(persist_upload, upload_dir, upload)
