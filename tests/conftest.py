"""
Pytest configuration and fixtures for the site backend tests.
"""
import json
import logging
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def app():
    """Get FastAPI application instance."""
    from main import app

    return app


@pytest_asyncio.fixture
async def async_client(app):
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def resend_env(monkeypatch):
    """Delivery settings pointing at a fake provider with no backoff."""
    monkeypatch.setenv("RESEND_API_KEY", "re_test_key_1234567890")
    monkeypatch.setenv("RESEND_API_URL", "https://mail.test")
    monkeypatch.setenv("RESEND_TIMEOUT_SECONDS", "1")
    monkeypatch.setenv("RESEND_MAX_RETRIES", "2")
    monkeypatch.setenv("RESEND_RETRY_BACKOFF", "0")
    return monkeypatch


class FakeResend:
    """
    Scripted stand-in for the Resend API.
    Each entry in `script` is either a status code, an (status, body) tuple,
    or an exception instance to raise for that attempt. The last entry
    repeats once the script runs out.
    """

    def __init__(self, script=None):
        self.script: List = list(script or [(200, {"id": "email_123"})])
        self.requests: List[httpx.Request] = []

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests) - 1, len(self.script) - 1)
        step = self.script[index]

        if isinstance(step, Exception):
            raise step
        if isinstance(step, int):
            step = (step, {})
        status_code, body = step
        return httpx.Response(status_code, json=body)


@pytest.fixture
def fake_resend(monkeypatch, resend_env) -> Callable[..., FakeResend]:
    """
    Install a FakeResend behind app.core.mailer.
    Call the fixture with a script to configure responses.
    """
    import app.core.mailer as mailer

    def install(script=None) -> FakeResend:
        fake = FakeResend(script)

        async def build_client(timeout_seconds):
            return httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))

        monkeypatch.setattr(mailer, "_build_client", build_client)
        return fake

    return install


@pytest.fixture
def app_log(caplog):
    """
    Capture records from the `app` logger tree.
    The application logger does not propagate to root, so caplog's handler
    is attached to it directly.
    """
    logger = logging.getLogger("app")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger="app")
    yield caplog
    logger.removeHandler(caplog.handler)
