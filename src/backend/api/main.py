"""
FastAPI server for natural-language artwork search.

This module handles application setup, lifespan management, and middleware configuration.
Route handlers are organized in the routers/ package.

Each search request runs the pipeline in entities/:
- Intent extraction via an LLM tool call
- Parameter sanitization into a FilterSpec
- GraphQL compilation for the Artsy artworksConnection
- Execution and normalization of the Artsy response
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from api.dependencies import close_pipeline_clients
from api.routers import search_router
from config.settings import get_settings
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

_settings = get_settings()

# Configure logging - use force=True to prevent duplicate handlers
logger = logging.getLogger(__name__)
logging.basicConfig(level=_settings.log_level.upper(), force=True)

# Reduce noise from HTTP and SDK libraries
logging.getLogger("azure").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_application: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Pipeline clients are built on the first search request and shared
    afterwards, so startup only reports configuration status and shutdown
    closes whatever was built.
    """
    logger.info("Artwork Search API starting")

    missing = get_settings().missing_credentials()
    if missing:
        logger.warning("=" * 60)
        logger.warning("WARNING: Search credentials are NOT configured!")
        logger.warning("Missing: %s", ", ".join(missing))
        logger.warning("Search requests will fail with a configuration error.")
        logger.warning("=" * 60)
    else:
        logger.info("Search credentials configured")

    yield

    await close_pipeline_clients()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(title="Artwork Search", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search_router)


@app.get("/health")
async def health_check() -> dict[str, object]:
    """Health check endpoint."""
    credentials_configured = not get_settings().missing_credentials()
    return {"status": "healthy", "credentials_configured": credentials_configured}


if __name__ == "__main__":
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)  # noqa: S104
