"""
HTTP adapter - Serves the resolver as a redirecting search endpoint.

Routes:
  GET /?q=...    → 303 See Other to the resolved URL
  GET /          → landing page
  GET /osdf.xml  → OpenSearch description, so browsers can add the engine

A query that cannot be turned into a URL gets a plain 500 response and is
never redirected. Every response carries the security headers below.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from loguru import logger

from shortcuts import __version__
from shortcuts.errors import UrlBuildError
from shortcuts.search.registry import resolve

RESOURCES_DIR = Path(__file__).parent / "resources"

DISABLED_FEATURES = (
    "accelerometer",
    "ambient-light-sensor",
    "autoplay",
    "battery",
    "camera",
    "display-capture",
    "document-domain",
    "encrypted-media",
    "execution-while-not-rendered",
    "execution-while-out-of-viewport",
    "fullscreen",
    "geolocation",
    "gyroscope",
    "layout-animations",
    "legacy-image-formats",
    "magnetometer",
    "microphone",
    "midi",
    "navigation-override",
    "oversized-images",
    "payment",
    "picture-in-picture",
    "publickey-credentials-get",
    "sync-xhr",
    "usb",
    "vr",
    "wake-lock",
    "screen-wake-lock",
    "web-share",
    "xr-spatial-tracking",
)

SECURITY_HEADERS = {
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "1; mode=block",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Feature-Policy": "; ".join(f"{feature} 'none'" for feature in DISABLED_FEATURES),
    "Content-Security-Policy": "default-src 'self'",
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
    "Cross-Origin-Embedder-Policy": "require-corp",
    "Cross-Origin-Resource-Policy": "cross-origin",
    "Cross-Origin-Opener-Policy": "same-origin",
}

router = APIRouter()


@lru_cache(maxsize=None)
def _resource(name: str) -> str:
    return (RESOURCES_DIR / name).read_text(encoding="utf-8")


@router.get("/")
async def index(q: Optional[str] = None):
    """Redirect to the destination for q, or show the landing page."""
    if q is None:
        return HTMLResponse(_resource("index.html"))
    url = resolve(q)
    return RedirectResponse(str(url), status_code=status.HTTP_303_SEE_OTHER)


@router.get("/osdf.xml")
async def osdf():
    return Response(
        _resource("osdf.xml"),
        media_type="application/opensearchdescription+xml",
    )


async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    return response


def register_error_handlers(app: FastAPI) -> None:
    """Map resolver errors to a generic failure response."""

    @app.exception_handler(UrlBuildError)
    async def url_build_error_handler(request: Request, exc: UrlBuildError):
        logger.error(f"Could not build redirect on {request.url.path}: {exc}")
        return PlainTextResponse(
            "Could not build a URL for this query",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="search-shortcuts",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.middleware("http")(add_security_headers)
    register_error_handlers(app)
    app.include_router(router)
    return app
