"""
FastAPI Application Module.

Builds the HTTP front-end of the document intelligence service: CORS,
Swagger docs, the analyze endpoint and the shared InvoiceAnalyzer whose
Form Recognizer client lives as long as the application.

Usage:
    uvicorn src.api.app:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_config
from src.analyzer import InvoiceAnalyzer
from src.utils.logger import get_logger
from .routes import router, health_router, ensure_analyzer, close_analyzer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_analyzer(app)
    logger.info("Document intelligence API started")

    yield

    await close_analyzer(app)
    logger.info("Document intelligence API stopped")


def create_app(analyzer: Optional[InvoiceAnalyzer] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        analyzer: Analyzer to serve requests with. If None, one is
                  created from configuration at startup.

    Returns:
        Configured FastAPI application.
    """
    docs_enabled = get_config("api.docs_enabled", True)

    app = FastAPI(
        title=get_config("api.title", "Document Intelligence API"),
        version=get_config("project.version", "1.0.0"),
        docs_url="/swagger" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/swagger/v1/swagger.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.analyzer = analyzer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_config("api.cors.allow_origins", ["*"]),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=get_config("api.route_prefix", "/api/DocumentIntelligence"))
    app.include_router(health_router)

    return app
