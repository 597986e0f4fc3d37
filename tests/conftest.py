from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from loguru import logger

from adapters.http_client import build_client
from core.config import AppSettings
from core.services import paste_pipeline

PASTE_URL = "https://www.pastery.net/abcdef/"


@dataclass
class FakePastery:
    """In-memory stand-in for the pastery.net paste endpoint."""

    reply: Any = field(default_factory=lambda: {"url": PASTE_URL})
    status_code: int = 200
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.reply, (bytes, str)):
            return httpx.Response(self.status_code, content=self.reply)
        return httpx.Response(self.status_code, json=self.reply)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_key="test-key")


@pytest.fixture
def fake_pastery(monkeypatch) -> FakePastery:
    fake = FakePastery()

    def _build_client(settings=None):
        return build_client(settings, transport=fake.transport())

    monkeypatch.setattr(paste_pipeline, "build_client", _build_client)
    return fake


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No API key in the environment and no project .env in the working dir."""

    monkeypatch.delenv("PASTERY_API_KEY", raising=False)
    monkeypatch.delenv("PASTERY_API_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
