"""
App module initialization.
"""
from app.services import news_analysis, verdict, page_state
from app.core import http_client

__all__ = [
    'news_analysis',
    'verdict',
    'page_state',
    'http_client'
]
