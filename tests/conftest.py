# tests/conftest.py
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.services.news_analysis import NewsAnalysisService  # noqa: E402


class FakeResponse:
    """Stands in for an aiohttp response used as ``async with session.post(...)``"""

    def __init__(self, status=200, body=None):
        self.status = status
        self._body = body

    async def text(self):
        if self._body is None:
            return ""
        if isinstance(self._body, str):
            return self._body
        return json.dumps(self._body)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records every outbound POST and replays canned responses"""

    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []
        self.closed = False

    def post(self, url, json=None, headers=None, params=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "params": params})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


def make_service(session):
    async def factory():
        return session
    return NewsAnalysisService(session_factory=factory)


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def perplexity_body(text):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def api_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test-key")
    monkeypatch.setenv("PERPLEXITY_API_KEY", "perplexity-test-key")


@pytest.fixture
def no_api_keys(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("PERPLEXITY_API_KEY", raising=False)


@pytest.fixture(autouse=True)
def default_models(monkeypatch):
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("PERPLEXITY_MODEL", raising=False)
