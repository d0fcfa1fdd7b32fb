"""
FastAPI application for the DART proxy.

Endpoints:
    GET /api/downloadCorpCodes   corpCode.xml ZIP archive, streamed
    GET /api/proxy?...           fnlttSinglAcntAll.json, relayed
    GET /                        health check

OpenAPI documentation is served at /docs.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from sources.dart.client import DartClient
from utils import log

from .config import settings
from .errors import register_error_handlers
from .json_proxy import proxy_financial_statements
from .models import ErrorResponse, HealthResponse
from .zip_relay import relay_corp_codes

logger = log.setup_logging("dart_proxy")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# Initialize FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)


def _make_client() -> DartClient:
    """Fresh client per request; raises ConfigurationError without a key."""
    return DartClient(
        api_key=settings.api_key,
        timeout=settings.UPSTREAM_TIMEOUT,
        base_url=settings.DART_BASE_URL,
    )


# ----------------------------------------------------------------
# Health
# ----------------------------------------------------------------

@app.get("/", response_model=HealthResponse, tags=["Health"])
def root():
    """
    API health check.

    Reports whether the DART API key is configured. Never calls DART.
    """
    configured = bool(settings.api_key)
    return {
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "status": "healthy" if configured else "degraded",
        "api_key_configured": configured,
    }


# ----------------------------------------------------------------
# DART
# ----------------------------------------------------------------

@app.get(
    "/api/downloadCorpCodes",
    tags=["DART"],
    responses={
        200: {"content": {"application/zip": {}}, "description": "CORPCODE.zip archive"},
        **ERROR_RESPONSES,
    },
)
def download_corp_codes():
    """
    Stream the corporate code ZIP archive (corpCode.xml) to the browser.
    """
    client = _make_client()
    return relay_corp_codes(client, settings.CHUNK_SIZE, settings.CORP_CODE_FILENAME)


@app.get("/api/proxy", tags=["DART"], responses=ERROR_RESPONSES)
def proxy(request: Request):
    """
    Forward a financial statement query to fnlttSinglAcntAll.json.

    Any query parameters (corp_code, bsns_year, reprt_code, fs_div, ...) are
    passed through exactly as received.
    """
    client = _make_client()
    return proxy_financial_statements(client, request.url.query, settings.CACHE_CONTROL)


if __name__ == "__main__":
    import uvicorn

    log.header(f"{settings.API_TITLE} v{settings.API_VERSION}")
    log.summary_table("Settings", [
        ("Listening", f"{settings.HOST}:{settings.PORT}"),
        ("Upstream", settings.DART_BASE_URL),
        ("Timeout", f"{settings.UPSTREAM_TIMEOUT:g}s"),
    ])
    if settings.api_key:
        log.ok(f"{settings.API_KEY_ENV} is set")
    else:
        log.warn(f"{settings.API_KEY_ENV} is not set; every request will fail with 500")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
