import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, JSONResponse
from dotenv import load_dotenv
import logging

from app.core.config import get_cors_origins, get_log_level
from app.core.errors import ProxyError
from app.core.http_client import get_http_session, cleanup_http_session
from app.routers import news_analysis
from app.services.news_analysis import NewsAnalysisService

# Load environment variables
load_dotenv(override=True)

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

# Application lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create the shared HTTP session and the proxy service
    await get_http_session()
    app.state.news_service = NewsAnalysisService()

    yield

    # Shutdown: Cleanup resources
    if hasattr(app.state, 'news_service'):
        await app.state.news_service.cleanup()
    await cleanup_http_session()

app = FastAPI(
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    title="News Authenticity Proxy",
    description="Forwards news text to Gemini or Perplexity and returns the model's analysis"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["POST"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    max_age=3600
)

app.include_router(news_analysis.router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

def _internal_error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"analysis": f"Internal server error: {message}"}
    )

@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    if exc.status_code < 500:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    logger.error(f"API call error on {request.url.path}: {exc.message}")
    return _internal_error(exc.message)

def _is_unreadable_body(error) -> bool:
    # An empty body reaches validation as a missing "body" rather than a JSON error
    if error.get("type") == "json_invalid":
        return True
    return error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(_is_unreadable_body(error) for error in errors):
        message = "Invalid JSON payload"
    else:
        message = "Invalid request payload"
    logger.warning(f"Rejected request to {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"error": message})

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=True)
    return _internal_error(str(exc))

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 10000))
    print("\n=== News Authenticity Proxy ===")
    print(f"API endpoint: http://0.0.0.0:{port}{news_analysis.ANALYZE_PATH}")
    print("===============================\n")

    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        log_level="info",
        proxy_headers=True
    )
