"""
HTTP API for editing video discovery.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Query, status
from fastapi.responses import JSONResponse

from .config import DiscoveryConfig
from .exceptions import MissingQueryError
from .models import SearchMode
from .pipeline import DEFAULT_QUERY, QUICK_PROMPTS, DiscoveryPipeline
from .search.providers import SearchProvider

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"


def create_app(
    config: Optional[DiscoveryConfig] = None, provider: Optional[SearchProvider] = None
) -> FastAPI:
    """Build the FastAPI application around a discovery pipeline."""
    config = config or DiscoveryConfig()
    pipeline = DiscoveryPipeline(config, provider)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """Application lifespan handler."""
        logger.info(f"Discovery API starting with provider '{config.search.provider}'")
        yield
        await pipeline.close()

    app = FastAPI(
        title="Editing Video Discovery API",
        description="Search YouTube for editing tutorials and short-form clips.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.pipeline = pipeline

    @app.get(
        "/api/search",
        summary="Search videos",
        description="Search for editing tutorials or shorts (type=shorts).",
    )
    async def search(
        q: Optional[str] = Query(None, description="Search query"),
        type: Optional[str] = Query(None, description='"shorts" for short-form clips'),
    ) -> JSONResponse:
        query = (q or "").strip()
        mode = SearchMode.from_param(type)

        try:
            response = await pipeline.search(query, mode)
        except MissingQueryError as e:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)}
            )
        except Exception as e:
            logger.error(f"YouTube search error for '{query}': {e}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(e) or UNEXPECTED_ERROR_MESSAGE},
            )

        return JSONResponse(content=response.to_dict())

    @app.get("/api/prompts", summary="Quick prompts")
    async def prompts() -> dict:
        """Suggested searches for the search box."""
        return {"default": DEFAULT_QUERY, "prompts": QUICK_PROMPTS}

    @app.get("/api/health", summary="Health Check")
    async def health() -> dict:
        return {"status": "ok", "provider": config.search.provider}

    return app
