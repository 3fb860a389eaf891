import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.simulation.presets import get_preset
from app.api.routes import health, presets, projections

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: apply log level and fail fast on a bad default preset
    logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())
    get_preset(settings.DEFAULT_PRESET)
    logger.info("Partner model ready (default preset: %s)", settings.DEFAULT_PRESET)
    yield


app = FastAPI(title="Partner Model", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(presets.router, prefix="/api")
app.include_router(projections.router, prefix="/api")
