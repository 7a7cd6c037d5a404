"""FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from strongsreader import __version__
from strongsreader.api.routes import router
from strongsreader.config import Settings
from strongsreader.ingest.lexicon_files import LexiconLoadError, store_from_settings
from strongsreader.lexicon import LexiconResolver, LexiconStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: LexiconStore | None = None
) -> FastAPI:
    """Build the API app around one lexicon store.

    Args:
        settings: Where to find lexicon files when no store is given
        store: Pre-built store (tests inject in-memory dictionaries here)
    """
    settings = settings or Settings()
    if store is None:
        store = store_from_settings(settings)

    app = FastAPI(
        title="Strong's Reader",
        description="Tagged scripture tokenization and Strong's lookups",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.resolver = LexiconResolver(store)

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LexiconLoadError)
    async def lexicon_unavailable(request: Request, exc: LexiconLoadError):
        logger.error(f"Lexicon unavailable: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    app.include_router(router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Strong's Reader",
            "version": __version__,
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app
