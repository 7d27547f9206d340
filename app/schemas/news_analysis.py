from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ProviderEnum(str, Enum):
    GEMINI = "gemini"
    PERPLEXITY = "perplexity"


class NewsAnalysisRequest(BaseModel):
    # Both fields are optional at the schema level so that a missing value
    # surfaces as a 400 with the proxy's own message rather than a 422
    news: Optional[str] = Field(
        None,
        description="The news text to analyze."
    )
    apiType: Optional[str] = Field(
        None,
        description="Upstream provider to forward the text to: 'gemini' or 'perplexity'."
    )


class NewsAnalysisResponse(BaseModel):
    analysis: str = Field(
        ...,
        description="Free-text analysis returned by the upstream model"
    )


class ErrorResponse(BaseModel):
    error: str
