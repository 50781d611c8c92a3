"""
ChopChop backend — FastAPI application entry-point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chopchop import __version__
from chopchop.config import settings
from chopchop.database import Base, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dir + tables exist
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    # Import models so Base.metadata knows about them
    import chopchop.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", settings.DATABASE_URL)
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; /api/gemini will answer 500")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="ChopChop",
    description="Receipt photo → fridge inventory → recipe ideas",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"service": "ChopChop", "version": __version__, "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API routers ─────────────────────────────────────────────────
from chopchop.routers.relay import router as relay_router  # noqa: E402
from chopchop.routers.scan import router as scan_router  # noqa: E402
from chopchop.routers.fridge import router as fridge_router  # noqa: E402
from chopchop.routers.session import router as session_router  # noqa: E402

app.include_router(relay_router, prefix="/api", tags=["Relay"])
app.include_router(scan_router, prefix="/api", tags=["Pipeline"])
app.include_router(fridge_router, prefix="/api", tags=["Fridge"])
app.include_router(session_router, prefix="/api", tags=["Session"])
