from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.api import cases, customers, preferences
from app.config import settings
from app.database import configure_engine, dispose_engine, init_db
from app.errors import register_exception_handlers
from crm_shared.preferences import (
    DensityPreferenceStore,
    MemoryStorage,
    RedisStorage,
    ThemePreferenceStore,
    ViewportStore,
)
from crm_shared.utils import close_redis, get_redis_client, setup_logging
import logging

setup_logging(level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)
logger = logging.getLogger(__name__)


def build_preference_storage():
    if settings.REDIS_URL:
        logger.info("[backend] UI preferences stored in Redis")
        return RedisStorage(get_redis_client(settings.REDIS_URL))
    return MemoryStorage()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("[backend] Tally CRM backend starting...")
    if settings.use_database:
        configure_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        await init_db()
        logger.info("[backend] Database initialized")
    else:
        logger.info("[backend] DATABASE_URL not set; case endpoints answer 503, mock data only")

    app.state.viewport_store = ViewportStore()
    storage = build_preference_storage()
    app.state.density_store = DensityPreferenceStore(storage, key=settings.DENSITY_STORAGE_KEY)
    app.state.theme_store = ThemePreferenceStore(storage, key=settings.THEME_STORAGE_KEY)
    yield
    # Shutdown
    logger.info("[backend] Tally CRM backend shutting down...")
    await dispose_engine()
    if settings.REDIS_URL:
        close_redis()


app = FastAPI(
    title=settings.API_TITLE,
    description="Case management, customer browsing and sales pipeline for an energy retailer",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    return {"message": "Tally CRM API v0.1.0"}


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "mode": "database" if settings.use_database else "mock",
    }


# Include routers
app.include_router(cases.router)
app.include_router(customers.router)
app.include_router(preferences.router)
