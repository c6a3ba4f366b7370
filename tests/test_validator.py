import asyncio

import pytest
from fastapi import Request

from upload_api.config import Settings
from upload_api.exceptions import (
    MethodNotAllowedError,
    MissingFilePartError,
    PayloadTooLargeError,
    UnsafeFilenameError,
)
from upload_api.services.validator import check_filename, read_limited_body, validate_upload

SMALL = Settings(max_upload_size=1024)


def make_request(chunks, method="POST", headers=()):
    scope = {
        "type": "http",
        "method": method,
        "path": "/upload",
        "query_string": b"",
        "headers": [(k.encode(), v.encode()) for k, v in headers],
    }
    messages = [
        {"type": "http.request", "body": c, "more_body": i < len(chunks) - 1}
        for i, c in enumerate(chunks)
    ]

    async def receive():
        return messages.pop(0)

    return Request(scope, receive)


def test_method_checked_before_body(api_settings):
    req = make_request([b"ignored"], method="PUT")
    with pytest.raises(MethodNotAllowedError) as info:
        asyncio.run(validate_upload(req, api_settings))
    assert info.value.status_code == 405
    assert info.value.message == "Método não permitido"


def test_declared_length_over_limit_rejected():
    req = make_request([b""], headers=[("content-length", "2048")])
    with pytest.raises(PayloadTooLargeError):
        asyncio.run(read_limited_body(req, SMALL))


def test_streamed_body_over_limit_rejected():
    req = make_request([b"a" * 600, b"b" * 600])
    with pytest.raises(PayloadTooLargeError):
        asyncio.run(read_limited_body(req, SMALL))


def test_body_at_limit_is_replayed():
    async def run():
        buffered = await read_limited_body(make_request([b"a" * 512, b"b" * 512]), SMALL)
        return await buffered.body()

    assert asyncio.run(run()) == b"a" * 512 + b"b" * 512


def test_limit_message_in_megabytes():
    assert PayloadTooLargeError(10).message == "O arquivo excede o limite de tamanho de 10 MB"


def test_non_form_body_is_missing_file(api_settings):
    req = make_request([b"plain"], headers=[("content-type", "text/plain")])
    with pytest.raises(MissingFilePartError):
        asyncio.run(validate_upload(req, api_settings))


@pytest.mark.parametrize("name", ["../evil.md", "a/b.txt", "..\\evil.md", "..", "bad\x00.md"])
def test_unsafe_filenames(name):
    with pytest.raises(UnsafeFilenameError):
        check_filename(name)


@pytest.mark.parametrize("name", ["notes.md", ".md", "my notes v2.yaml"])
def test_safe_filenames(name):
    check_filename(name)


def test_limit_message_uses_configured_ceiling():
    req = make_request([b""], headers=[("content-length", str(3 * 1024 * 1024))])
    with pytest.raises(PayloadTooLargeError) as info:
        asyncio.run(read_limited_body(req, Settings(max_upload_size=2 * 1024 * 1024)))
    assert info.value.limit_mb == 2
