"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from common.cli_helpers import setup_logging
from document_store.store import DocumentNotFoundError, DocumentStoreError
from media_api.config import AppConfig, get_config
from media_api.routers import admin, analytics, auth, comments, content, feeds, pages, search, site
from media_api.services import Services, build_services

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(config: Optional[AppConfig] = None, services: Optional[Services] = None) -> FastAPI:
    """Build the API.

    Args:
        config: App config; defaults to the global config ($MEDIA_API_CONFIG)
        services: Prebuilt services; built from config when omitted
    """
    config = config or get_config()

    app = FastAPI(
        title="Triton Media API",
        description="Content, comments, search and widget data for the student media site",
        version=VERSION,
    )
    app.state.config = config
    app.state.services = services or build_services(config)

    @app.exception_handler(DocumentNotFoundError)
    async def document_not_found(request: Request, exc: DocumentNotFoundError):
        return JSONResponse(status_code=404, content={"success": False, "error": str(exc)})

    @app.exception_handler(DocumentStoreError)
    async def document_store_error(request: Request, exc: DocumentStoreError):
        logger.error("Document store error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"success": False, "error": "Content is temporarily unavailable. Please try again."},
        )

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "Triton Media API",
            "version": VERSION,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    for router in content.routers:
        app.include_router(router)
    app.include_router(pages.router)
    app.include_router(comments.router)
    app.include_router(search.router)
    app.include_router(site.router)
    app.include_router(analytics.router)
    app.include_router(auth.router)
    app.include_router(admin.router)
    app.include_router(feeds.router)

    return app


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    uvicorn.run(
        "media_api.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
