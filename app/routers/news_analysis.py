from fastapi import APIRouter, Depends, Request
import logging

from app.schemas import (
    ErrorResponse,
    NewsAnalysisRequest,
    NewsAnalysisResponse,
    VerdictRequest,
    VerdictResponse,
)
from app.services.news_analysis import NewsAnalysisService
from app.services.verdict import classify

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze-news"
# Path the original serverless function was deployed under
LEGACY_ANALYZE_PATH = "/.netlify/functions/analyze-news"

router = APIRouter(tags=["news-analysis"])


def get_news_service(request: Request) -> NewsAnalysisService:
    service = getattr(request.app.state, "news_service", None)
    if service is None:
        service = NewsAnalysisService()
        request.app.state.news_service = service
    return service


@router.post(
    ANALYZE_PATH,
    response_model=NewsAnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": NewsAnalysisResponse}}
)
@router.post(LEGACY_ANALYZE_PATH, response_model=NewsAnalysisResponse, include_in_schema=False)
async def analyze_news(
    request: NewsAnalysisRequest,
    service: NewsAnalysisService = Depends(get_news_service)
) -> NewsAnalysisResponse:
    """
    Forward news text to the selected model and return its free-text analysis.

    Errors are raised as ``ProxyError`` and rendered by the app's exception
    handlers: 400 ``{"error": ...}`` for bad input, 500 ``{"analysis": ...}``
    for configuration or upstream failures.
    """
    analysis = await service.analyze_news(request.news, request.apiType)
    return NewsAnalysisResponse(analysis=analysis)


@router.post("/api/verdict", response_model=VerdictResponse)
async def classify_analysis(request: VerdictRequest) -> VerdictResponse:
    """Bucket an analysis text into real / fake / uncertain with a display confidence"""
    verdict = classify(request.analysis)
    return VerdictResponse.from_verdict(verdict)
