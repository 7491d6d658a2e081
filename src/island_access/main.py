# src/island_access/main.py
"""Main entry point for the Island application."""

from __future__ import annotations

from fastapi import FastAPI

from island_access.api.v1 import resources_router
from island_access.core.logging import configure_logging
from island_access.core.settings import settings

configure_logging()

# Initialize FastAPI app
app = FastAPI(
    title="Island API",
    description="Visibility-checked access to climbing resources",
    version=settings.app_version,
)

# Include API routers
app.include_router(resources_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("island_access.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
