from .news_analysis import ProviderEnum, NewsAnalysisRequest, NewsAnalysisResponse, ErrorResponse
from .verdict import VerdictLabel, Verdict, VerdictRequest, VerdictResponse

__all__ = [
    'ProviderEnum',
    'NewsAnalysisRequest',
    'NewsAnalysisResponse',
    'ErrorResponse',
    'VerdictLabel',
    'Verdict',
    'VerdictRequest',
    'VerdictResponse'
]
