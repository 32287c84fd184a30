"""FastAPI application — entry point for the account vault service."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from db import create_tables
from routes import router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("=" * 70)
    logger.info("Creator Ops Vault - Starting Up")
    logger.info("=" * 70)
    logger.info("Mode: %s", "DEMO MODE" if settings.demo_mode else "PRODUCTION MODE")
    logger.info("Port: %d", settings.port)

    logger.info("Creating database tables...")
    await create_tables()

    if settings.demo_mode and settings.seed_on_startup:
        logger.info("Demo mode enabled - seeding demo data...")
        try:
            from scripts.seed_demo_data import seed_demo_data
            if await seed_demo_data(clear_existing=False):
                logger.info("✓ Demo data seeded successfully")
        except Exception as e:
            logger.error("Failed to seed demo data: %s", e)
            logger.error("Continuing without demo data...")

    logger.info("Creator Ops Vault is running on http://localhost:%d", settings.port)
    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Creator Ops Vault",
    description="Credential vault and device board for the creator operations dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=True)
