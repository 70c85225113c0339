"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from note_insights.analytics.router import router as analytics_router
from note_insights.config import get_settings
from note_insights.dependencies import logger, shutdown_image_executor
from note_insights.images.router import router as images_router
from note_insights.notes.router import router as notes_router
from note_insights.search.router import router as search_router
from note_insights.tags.router import router as tags_router

VERSION = "0.1.0"

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release the image worker pool on shutdown."""
    yield
    shutdown_image_executor()
    logger.info("app_shutdown")


app = FastAPI(title="Note Insights", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analytics_router)
app.include_router(search_router)
app.include_router(images_router)
app.include_router(tags_router)
app.include_router(notes_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {"name": "Note Insights", "version": VERSION, "docs": "/docs"}


logger.info("app_startup", extra={"host": settings.host, "port": settings.port})
