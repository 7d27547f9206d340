import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Optional

import aiohttp

from app.core.errors import InvalidInput, MissingCredential, UpstreamError
from app.core.http_client import get_http_session
from app.services.providers import BaseProvider, get_provider

logger = logging.getLogger(__name__)

NO_ANALYSIS = "No analysis available"


class NewsAnalysisService:
    """
    Forwards news text to the selected upstream model and returns its analysis.

    One outbound POST per call, no retries and no caching. Failures are raised
    as ``ProxyError`` subclasses for the HTTP layer to map onto status codes.
    """

    def __init__(self, session_factory: Callable[[], Awaitable[aiohttp.ClientSession]] = get_http_session):
        self._session_factory = session_factory
        self._session = None

    async def get_session(self):
        """Get or create the HTTP session"""
        if self._session is None or getattr(self._session, "closed", False):
            self._session = await self._session_factory()
        return self._session

    async def cleanup(self):
        """No cleanup needed as session is managed by http_client"""
        self._session = None

    async def analyze_news(self, text: Optional[str], provider_name: Optional[str]) -> str:
        if not isinstance(text, str) or not text.strip():
            raise InvalidInput("News text is required.")
        provider = get_provider(provider_name)

        try:
            api_key = provider.get_api_key()
        except MissingCredential:
            logger.error(f"{provider.display_name} API key is not configured ({provider.api_key_env})")
            raise

        logger.info(f"Forwarding {len(text)} characters to {provider.name}")
        status, body = await self._post(provider, text, api_key)

        if not 200 <= status < 300:
            message = provider.error_message(body)
            logger.error(f"{provider.display_name} API error: status={status} body={body!r}")
            raise UpstreamError(
                provider.name,
                f"{provider.display_name} API responded with status {status}: {message}",
                status=status,
                body=body
            )

        if isinstance(body, UnparsedBody):
            logger.error(f"{provider.display_name} API returned a non-JSON body: {body!r}")
            raise UpstreamError(
                provider.name,
                f"{provider.display_name} API returned a malformed response",
                status=status,
                body=body
            )

        analysis = provider.extract_text(body)
        if analysis is None:
            logger.warning(f"{provider.display_name} response had no text completion, using placeholder")
            return NO_ANALYSIS
        return analysis

    async def _post(self, provider: BaseProvider, text: str, api_key: str):
        request = provider.build_request(text, api_key)
        session = await self.get_session()
        try:
            async with session.post(
                request.url,
                json=request.payload,
                headers=request.headers,
                params=request.params or None
            ) as response:
                status = response.status
                raw = await response.text()
        except asyncio.TimeoutError:
            logger.error(f"{provider.display_name} API request timed out")
            raise UpstreamError(provider.name, f"{provider.display_name} API request timed out")
        except aiohttp.ClientError as e:
            # aiohttp messages can echo the request URL, which carries the Gemini key
            reason = str(e).replace(api_key, "***")
            logger.error(f"{provider.display_name} API request failed: {reason}")
            raise UpstreamError(provider.name, f"{provider.display_name} API request failed: {reason}")
        return status, _parse_body(raw)


class UnparsedBody(str):
    """Response text that could not be decoded as JSON"""


def _parse_body(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return UnparsedBody(raw)
