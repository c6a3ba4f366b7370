import pytest
from pydantic import ValidationError

from upload_api.config import (
    API_MAX_UPLOAD_SIZE,
    APP_VERSION,
    PLAIN_MAX_UPLOAD_SIZE,
    Settings,
    load_settings,
)


def test_variant_ceilings():
    assert load_settings("plain").max_upload_size == PLAIN_MAX_UPLOAD_SIZE == 10 * 1024 * 1024
    assert load_settings("api").max_upload_size == API_MAX_UPLOAD_SIZE == 5 * 1024 * 1024


def test_defaults(monkeypatch):
    monkeypatch.delenv("UPLOAD_DIR", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    s = load_settings()
    assert s.port == 8080
    assert s.upload_dir == "./uploads"
    assert s.field_name == "file"
    assert s.app_version == APP_VERSION
    assert s.max_upload_mb == 5


def test_env_overrides_deployment_knobs(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    monkeypatch.setenv("PORT", "9090")
    s = load_settings("plain")
    assert s.upload_dir == str(tmp_path)
    assert s.port == 9090


def test_unknown_variant():
    with pytest.raises(ValueError):
        load_settings("grpc")


def test_settings_are_immutable():
    s = Settings()
    with pytest.raises(ValidationError):
        s.max_upload_size = 1
