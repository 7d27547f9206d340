# tests/test_providers.py
import pytest

from app.core.errors import InvalidInput, MissingCredential
from app.services.providers import (
    PROVIDERS,
    GeminiProvider,
    PerplexityProvider,
    get_provider,
)
from tests.conftest import gemini_body, perplexity_body


def test_registry_has_exactly_two_providers():
    assert set(PROVIDERS) == {"gemini", "perplexity"}
    assert isinstance(get_provider("gemini"), GeminiProvider)
    assert isinstance(get_provider("perplexity"), PerplexityProvider)


@pytest.mark.parametrize("name", ["openai", "Gemini", "", None, 3])
def test_unknown_provider_is_invalid_input(name):
    with pytest.raises(InvalidInput) as exc_info:
        get_provider(name)
    assert exc_info.value.message == "Invalid API type specified."


def test_gemini_request_shape():
    request = GeminiProvider().build_request("Aliens landed", "secret")

    assert request.url == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert request.params == {"key": "secret"}
    assert "Authorization" not in request.headers
    content = request.payload["contents"][0]
    assert content["role"] == "user"
    prompt = content["parts"][0]["text"]
    assert prompt.startswith("Analyze the following news text for authenticity, bias, and factual accuracy.")
    assert prompt.endswith(':\n\n"Aliens landed"')
    assert request.payload["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 200}


def test_gemini_model_comes_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-pro")
    request = GeminiProvider().build_request("x", "k")
    assert request.url.endswith("/gemini-1.5-pro:generateContent")


def test_perplexity_request_shape():
    request = PerplexityProvider().build_request("Aliens landed", "secret")

    assert request.url == "https://api.perplexity.ai/chat/completions"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.params == {}
    payload = request.payload
    assert payload["model"] == "sonar-small-chat"
    assert payload["temperature"] == 0.7
    assert payload["max_tokens"] == 200
    system, user = payload["messages"]
    assert system["role"] == "system"
    assert "'likely real,' 'likely fake,' or 'uncertain.'" in system["content"]
    assert user == {"role": "user", "content": "Aliens landed"}


def test_extract_text_from_envelopes():
    assert GeminiProvider().extract_text(gemini_body("ok")) == "ok"
    assert PerplexityProvider().extract_text(perplexity_body("fine")) == "fine"


@pytest.mark.parametrize("body", [
    {},
    {"candidates": []},
    {"candidates": [{"content": {"parts": []}}]},
    {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    {"candidates": "oops"},
    [],
])
def test_gemini_missing_field_returns_none(body):
    assert GeminiProvider().extract_text(body) is None


def test_perplexity_missing_field_returns_none():
    assert PerplexityProvider().extract_text({"choices": [{"message": {}}]}) is None


def test_missing_key_raises_missing_credential(no_api_keys):
    with pytest.raises(MissingCredential) as exc_info:
        PerplexityProvider().get_api_key()
    assert exc_info.value.message == "Perplexity API Key not configured."
    assert exc_info.value.provider == "perplexity"


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    with pytest.raises(MissingCredential):
        GeminiProvider().get_api_key()


def test_error_message_prefers_upstream_error_message():
    provider = GeminiProvider()
    assert provider.error_message({"error": {"code": 400, "message": "API key not valid"}}) == "API key not valid"
    assert provider.error_message({"error": "rate limited"}) == "rate limited"
    assert provider.error_message({"detail": "nope"}) == '{"detail": "nope"}'
    assert provider.error_message("Bad Gateway") == "Bad Gateway"
    assert provider.error_message(None) == ""
