"""
Detector page state.

The page is modelled as an immutable value: every transition returns a new
``PageState`` instead of mutating elements, so the submit cycle can be driven
and inspected without a rendering surface.
"""
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, Optional

from app.core.errors import ProxyError
from app.schemas.verdict import Verdict
from app.services.verdict import RandomSource, classify

logger = logging.getLogger(__name__)

PAGE_SUFFIX = "-page"
HOME_PAGE = "home-page"
DEFAULT_PROVIDER = "gemini"
EMPTY_INPUT_MESSAGE = "Please enter some news text to analyze."


class StatusPanel(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class PageState:
    active_page: str = HOME_PAGE
    status: StatusPanel = StatusPanel.IDLE
    analysis_text: Optional[str] = None
    verdict: Optional[Verdict] = None
    error_message: Optional[str] = None

    @property
    def active_nav(self) -> str:
        if self.active_page.endswith(PAGE_SUFFIX):
            return self.active_page[:-len(PAGE_SUFFIX)]
        return self.active_page

    @property
    def analyze_enabled(self) -> bool:
        return self.status is not StatusPanel.LOADING

    def show_page(self, page_id: str) -> "PageState":
        if not page_id:
            raise ValueError("page_id must be non-empty")
        logger.debug(f"Showing page: {page_id}")
        return PageState(active_page=page_id)

    def show_loading(self) -> "PageState":
        return replace(self, status=StatusPanel.LOADING, analysis_text=None, verdict=None, error_message=None)

    def show_result(self, analysis_text: str, verdict: Verdict) -> "PageState":
        return replace(self, status=StatusPanel.RESULT, analysis_text=analysis_text, verdict=verdict, error_message=None)

    def show_error(self, message: str) -> "PageState":
        return replace(self, status=StatusPanel.ERROR, analysis_text=None, verdict=None, error_message=message)


Analyzer = Callable[[str, str], Awaitable[str]]


class DetectorSession:
    """Drives one page through navigation and analyze/submit cycles"""

    def __init__(self, analyzer: Analyzer, random_source: RandomSource = random.random):
        self.analyzer = analyzer
        self.random_source = random_source
        self.state = PageState().show_page(HOME_PAGE)

    def navigate(self, nav_key: str) -> PageState:
        self.state = self.state.show_page(nav_key + PAGE_SUFFIX)
        return self.state

    async def submit(self, text: str, provider: Optional[str] = None) -> PageState:
        content = (text or "").strip()
        if not content:
            self.state = self.state.show_error(EMPTY_INPUT_MESSAGE)
            return self.state

        provider = provider or DEFAULT_PROVIDER
        self.state = self.state.show_loading()
        logger.info(f"Starting analysis, content length: {len(content)}, using API: {provider}")
        try:
            analysis = await self.analyzer(content, provider)
        except ProxyError as e:
            logger.error(f"Analysis failed: {e.message}")
            self.state = self.state.show_error(f"Analysis failed: {e.message}. Please try again.")
            return self.state

        verdict = classify(analysis, self.random_source)
        self.state = self.state.show_result(analysis, verdict)
        return self.state
