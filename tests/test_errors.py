# tests/test_errors.py
from app.core.errors import InvalidInput, MissingCredential, ProxyError, UpstreamError


def test_status_codes_by_error_kind():
    assert InvalidInput("x").status_code == 400
    assert MissingCredential("gemini", "x").status_code == 500
    assert UpstreamError("gemini", "x", status=429).status_code == 500
    assert ProxyError("x").status_code == 500
