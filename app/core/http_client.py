from aiohttp import ClientSession, TCPConnector, ClientTimeout
from typing import Optional
import logging

from app.core.config import get_upstream_timeout

logger = logging.getLogger(__name__)

_session: Optional[ClientSession] = None

async def get_http_session() -> ClientSession:
    """Get or create a shared aiohttp session with connection pooling"""
    global _session
    if _session is None or _session.closed:
        connector = TCPConnector(
            limit=100,  # Maximum number of concurrent connections
            limit_per_host=20,  # Upstream APIs are only two hosts
            keepalive_timeout=120,
            enable_cleanup_closed=True
        )
        total = get_upstream_timeout()
        timeout = ClientTimeout(
            total=total,
            connect=min(10.0, total)
        )
        # Status codes are inspected by the caller, so no raise_for_status
        _session = ClientSession(
            connector=connector,
            timeout=timeout,
            raise_for_status=False
        )
        logger.info(f"Created new persistent HTTP session (timeout={total}s)")
    return _session

async def cleanup_http_session():
    """Cleanup the shared HTTP session"""
    global _session
    if _session and not _session.closed:
        await _session.close()
        _session = None
        logger.info("Closed persistent HTTP session")
