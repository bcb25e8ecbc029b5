"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from design_studio import __version__
from design_studio.api import auth, designs, uploads
from design_studio.api.error_handlers import register_error_handlers
from design_studio.config import get_settings
from design_studio.database import init_db
from design_studio.services.uploads import UploadStore

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    UploadStore(settings.upload_dir).ensure_directory()
    logger.info(f"Design Studio API started ({settings.environment})")
    yield


app = FastAPI(
    title="Design Studio API",
    description="Accounts, uploads and saved garment designs for the Design Studio app",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for development (Expo web / Metro)
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_error_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(designs.router)
app.include_router(uploads.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
