# src/campus_wall/main.py
"""Main entry point for the Campus Wall application."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_wall import __version__
from campus_wall.api.error_handlers import register_error_handlers
from campus_wall.api.v1 import posts_router
from campus_wall.core.log_config import configure_logging
from campus_wall.core.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Campus Wall API",
    description="Anonymous campus and national social wall",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_error_handlers(app)
app.include_router(posts_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("campus_wall.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
