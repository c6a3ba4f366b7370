import pytest
from fastapi.testclient import TestClient

from upload_api.config import API_MAX_UPLOAD_SIZE, PLAIN_MAX_UPLOAD_SIZE, Settings
from upload_api.main import create_api_app, create_plain_app


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def plain_settings(upload_dir):
    return Settings(max_upload_size=PLAIN_MAX_UPLOAD_SIZE, upload_dir=str(upload_dir))


@pytest.fixture
def api_settings(upload_dir):
    return Settings(max_upload_size=API_MAX_UPLOAD_SIZE, upload_dir=str(upload_dir))


@pytest.fixture
def plain_client(plain_settings):
    with TestClient(create_plain_app(plain_settings)) as c:
        yield c


@pytest.fixture
def api_client(api_settings):
    with TestClient(create_api_app(api_settings)) as c:
        yield c
