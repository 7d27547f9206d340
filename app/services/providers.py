"""
Upstream provider adapters.

Each provider knows how to turn the submitted news text into its own wire
request and how to pull the first text completion back out of its response
envelope. The gateway picks one by the request's ``apiType``.
"""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.core.config import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_PERPLEXITY_MODEL,
    get_api_key,
    get_model,
)
from app.core.errors import InvalidInput, MissingCredential

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 200

GEMINI_PROMPT = (
    "Analyze the following news text for authenticity, bias, and factual accuracy. "
    "Provide a concise summary and clearly state if it's \"likely real,\" \"likely fake,\" "
    "or \"uncertain.\" Also mention the basis of your conclusion in a simple, direct manner. "
    "Keep the response to max 200 words."
)

PERPLEXITY_SYSTEM_PROMPT = (
    "You are a helpful AI assistant specialized in news analysis. Analyze the provided text "
    "for authenticity, bias, and factual accuracy. Provide a concise summary and clearly "
    "state if it's 'likely real,' 'likely fake,' or 'uncertain.' Briefly explain your "
    "reasoning. Keep the response to max 200 words."
)


@dataclass(frozen=True)
class UpstreamRequest:
    url: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


def _dig(body: Any, *path) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing"""
    current = body
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or len(current) <= step:
                return None
        elif not isinstance(current, dict) or step not in current:
            return None
        current = current[step]
    return current


class BaseProvider(ABC):
    name: str
    display_name: str
    api_key_env: str

    def get_api_key(self) -> str:
        api_key = get_api_key(self.api_key_env)
        if not api_key:
            raise MissingCredential(self.name, f"{self.display_name} API Key not configured.")
        return api_key

    @abstractmethod
    def build_request(self, text: str, api_key: str) -> UpstreamRequest:
        raise NotImplementedError

    @abstractmethod
    def extract_text(self, body: Any) -> Optional[str]:
        """Return the first textual completion, or None when the field is absent"""
        raise NotImplementedError

    def error_message(self, body: Any) -> str:
        """Best human-readable message from an upstream error body"""
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
            return json.dumps(body)
        if body is None:
            return ""
        return str(body)


class GeminiProvider(BaseProvider):
    name = "gemini"
    display_name = "Gemini"
    api_key_env = "GEMINI_API_KEY"
    base_url = "https://generativelanguage.googleapis.com/v1beta/models"

    @property
    def model(self) -> str:
        return get_model("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)

    def build_request(self, text: str, api_key: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=f"{self.base_url}/{self.model}:generateContent",
            payload={
                "contents": [{
                    "role": "user",
                    "parts": [{"text": f"{GEMINI_PROMPT}:\n\n\"{text}\""}]
                }],
                "generationConfig": {
                    "temperature": TEMPERATURE,
                    "maxOutputTokens": MAX_OUTPUT_TOKENS
                }
            },
            headers={"Content-Type": "application/json"},
            params={"key": api_key}
        )

    def extract_text(self, body: Any) -> Optional[str]:
        text = _dig(body, "candidates", 0, "content", "parts", 0, "text")
        return text if isinstance(text, str) and text else None


class PerplexityProvider(BaseProvider):
    name = "perplexity"
    display_name = "Perplexity"
    api_key_env = "PERPLEXITY_API_KEY"
    url = "https://api.perplexity.ai/chat/completions"

    @property
    def model(self) -> str:
        return get_model("PERPLEXITY_MODEL", DEFAULT_PERPLEXITY_MODEL)

    def build_request(self, text: str, api_key: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=self.url,
            payload={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": PERPLEXITY_SYSTEM_PROMPT},
                    {"role": "user", "content": text}
                ],
                "temperature": TEMPERATURE,
                "max_tokens": MAX_OUTPUT_TOKENS
            },
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}"
            }
        )

    def extract_text(self, body: Any) -> Optional[str]:
        text = _dig(body, "choices", 0, "message", "content")
        return text if isinstance(text, str) and text else None


PROVIDERS: Dict[str, BaseProvider] = {
    provider.name: provider for provider in (GeminiProvider(), PerplexityProvider())
}


def get_provider(name: Optional[str]) -> BaseProvider:
    provider = PROVIDERS.get(name) if isinstance(name, str) else None
    if provider is None:
        logger.warning(f"Rejected unknown provider: {name!r}")
        raise InvalidInput("Invalid API type specified.")
    return provider
