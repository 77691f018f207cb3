import pytest
import respx
from fastapi.testclient import TestClient

from birdwatch.web.config import WebConfig
from birdwatch.web.main import create_app

LOCAL_BASE = "http://backend.local:9000"
REMOTE_BASE = "http://backend.remote:9000"


@pytest.fixture
def web_config():
    """Config isolated from the developer's .env and environment."""
    return WebConfig(_env_file=None, LOCAL_API_BASE=LOCAL_BASE, REMOTE_API_BASE=REMOTE_BASE)


@pytest.fixture
def client(web_config):
    app = create_app(web_config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def backend():
    """Mock of the inference backend; unmatched outbound calls fail the request."""
    with respx.mock(assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
def local_base():
    return LOCAL_BASE


@pytest.fixture
def remote_base():
    return REMOTE_BASE
