"""
Services package initialization
"""
from app.services.news_analysis import NewsAnalysisService
from app.services.verdict import classify
from app.services.page_state import PageState, DetectorSession

__all__ = [
    'NewsAnalysisService',
    'classify',
    'PageState',
    'DetectorSession'
]
