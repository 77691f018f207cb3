"""
Where: birdwatch/web/tests/test_config_defaults.py
What: Validate default WebConfig values and environment overrides.
"""

from birdwatch.web.config import WebConfig

_BACKEND_VARS = (
    "LOCAL_API_BASE",
    "REMOTE_API_BASE",
    "PREFER_HTTPS",
    "BIRD_SUBMIT_PATH",
    "UPSTREAM_TIMEOUT",
    "STREAM_READ_TIMEOUT",
)


def _clear_env(monkeypatch) -> None:
    for name in _BACKEND_VARS:
        monkeypatch.delenv(name, raising=False)


def test_backend_defaults(monkeypatch):
    _clear_env(monkeypatch)

    config = WebConfig(_env_file=None)

    assert config.LOCAL_API_BASE == "http://127.0.0.1:9000"
    assert config.REMOTE_API_BASE == "http://some.server.com:9000"
    assert config.PREFER_HTTPS is False
    assert config.BIRD_SUBMIT_PATH == "/birdsubmit"
    assert config.STREAM_READ_TIMEOUT is None
    assert config.VERIFY_SSL is False


def test_backend_env_overrides(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("LOCAL_API_BASE", "http://127.0.0.1:9100")
    monkeypatch.setenv("REMOTE_API_BASE", "http://birds.example.org:9000/")
    monkeypatch.setenv("PREFER_HTTPS", "true")
    monkeypatch.setenv("STREAM_READ_TIMEOUT", "120")

    config = WebConfig(_env_file=None)

    assert config.LOCAL_API_BASE == "http://127.0.0.1:9100"
    assert config.REMOTE_API_BASE == "http://birds.example.org:9000/"
    assert config.PREFER_HTTPS is True
    assert config.STREAM_READ_TIMEOUT == 120.0
