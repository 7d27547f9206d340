import os
from typing import List, Optional


DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_PERPLEXITY_MODEL = "sonar-small-chat"
DEFAULT_UPSTREAM_TIMEOUT = 30.0


def get_api_key(env_var: str) -> Optional[str]:
    """Read a provider key at call time so a missing key is reported per request"""
    value = os.environ.get(env_var)
    if value and value.strip():
        return value.strip()
    return None


def get_model(env_var: str, default: str) -> str:
    return os.environ.get(env_var) or default


def get_upstream_timeout() -> float:
    raw = os.environ.get("UPSTREAM_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_UPSTREAM_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"UPSTREAM_TIMEOUT_SECONDS must be a number, got {raw!r}")
    if timeout <= 0:
        raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be positive")
    return timeout


def get_cors_origins() -> List[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
