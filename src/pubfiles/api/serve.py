"""Web server for ``pubfiles serve``.

Serves the public download pages (``/download/...``, ``/files/...``) and the
versioned JSON API at ``/api/v1/``. The server holds no state between
requests; every page mounts a fresh view.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


async def security_headers_middleware(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"
    # Inline styles only; downloads go straight to the storage API
    response.headers["Content-Security-Policy"] = (
        "default-src 'self'; style-src 'self' 'unsafe-inline'; frame-ancestors 'none'"
    )
    return response


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    from pubfiles.api.pages import router as pages_router
    from pubfiles.api.v1 import mount_v1_routers
    from pubfiles.config import get_settings

    app = FastAPI(
        title="pubfiles",
        description="Anonymous browsing and download of public storages.",
        version="1.0.0",
        docs_url="/api/v1/docs",
        redoc_url=None,
        openapi_url="/api/v1/openapi.json",
    )

    origins = get_settings().cors_allowed_origins
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["Content-Type"],
        )

    app.middleware("http")(security_headers_middleware)

    mount_v1_routers(app)
    app.include_router(pages_router)

    return app


def run_server(host: str = "127.0.0.1", port: int = 8888, dev: bool = False) -> None:
    """Start the web server."""
    import uvicorn

    from pubfiles.config import get_settings

    print("\n" + "=" * 50)
    print("PUBFILES")
    print("=" * 50)
    print(f"\n\U0001f310 Open http://{'localhost' if host == '0.0.0.0' else host}:{port}/")
    print(f"   Storage API: {get_settings().api_base}\n")

    if dev:
        import pathlib

        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "pubfiles.api.serve:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py", "*.html"],
            log_level="debug",
        )
    else:
        uvicorn.run(create_app(), host=host, port=port)
