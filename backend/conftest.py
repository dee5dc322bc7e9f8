"""Shared pytest fixtures: a fake AI gateway and an API test client."""

from types import SimpleNamespace

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from services import ai_gateway, chat


def completion(content=None, images=None):
    """Chat-completion response shaped like the OpenAI SDK's."""
    message = SimpleNamespace(content=content, images=images)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def image_completion(url):
    return completion(content="", images=[{"type": "image_url", "image_url": {"url": url}}])


def status_error(status_code, message="upstream failure"):
    """openai.APIStatusError (or subclass) for a given gateway status."""
    request = httpx.Request("POST", "https://gateway.test/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    cls = openai.RateLimitError if status_code == 429 else openai.APIStatusError
    return cls(message, response=response, body=None)


class FakeCompletions:
    """Stands in for client.chat.completions; replies are queued per test."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError("Unexpected AI gateway call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def gateway(monkeypatch):
    """Configured gateway backed by FakeCompletions."""
    completions = FakeCompletions()
    fake_client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(ai_gateway, "AI_GATEWAY_API_KEY", "test-key")
    monkeypatch.setattr(ai_gateway, "_gateway_client", fake_client)
    return completions


@pytest.fixture
def no_providers(monkeypatch):
    """Neither the gateway nor Groq configured."""
    monkeypatch.setattr(ai_gateway, "AI_GATEWAY_API_KEY", "")
    monkeypatch.setattr(ai_gateway, "_gateway_client", None)
    monkeypatch.setattr(chat, "GROQ_API_KEY", "")
    monkeypatch.setattr(chat, "_groq_client", None)


@pytest.fixture
def client():
    from main import app
    with TestClient(app) as c:
        yield c
