"""FastAPI app with API routes and saved image serving"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from rowgram.config import get_settings
from rowgram.routes import router

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Make sure asset directories exist on startup."""
    logger.info("Starting RowGram...")
    for directory in (settings.saved_images_dir, settings.club_icons_dir, settings.upload_dir):
        Path(directory).mkdir(parents=True, exist_ok=True)
    yield
    logger.info("Shutting down...")


app = FastAPI(title="RowGram", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")

# Created in lifespan, so skip the mount-time existence check
app.mount("/images", StaticFiles(directory=settings.saved_images_dir, check_dir=False), name="images")
