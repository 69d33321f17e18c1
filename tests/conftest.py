import json

import httpx
import pytest

from service_logging import clock
from service_logging.config import CoralogixConfig


@pytest.fixture
def fixed_clock(monkeypatch):
    """Pin the entry timestamp to a known value."""
    monkeypatch.setattr(clock, "current_time_millis", lambda: 1_700_000_000_123)
    return 1_700_000_000_123


@pytest.fixture
def cx_config():
    return CoralogixConfig(
        api_key="test-key",
        application_name="test-app",
        endpoint="https://logs.example.com/api/v1/logs",
    )


class RecordingService:
    """Mock logging service: records requests and answers with a fixed response."""

    def __init__(self, status_code: int = 200, body: str = ""):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def service():
    return RecordingService()
