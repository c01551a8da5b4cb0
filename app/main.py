"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from app.domain.models.restaurant import Restaurant  # noqa: F401
from app.domain.models.user import User  # noqa: F401

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.restaurants import router as restaurants_router
from app.interfaces.api.voting import router as voting_router
from app.interfaces.api.users import router as users_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Plateful backend...", env=settings.ENVIRONMENT)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("Plateful backend stopped")


app = FastAPI(
    title="Plateful",
    description="API Backend — restaurant discovery, voting, favorites and history",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(restaurants_router)
app.include_router(voting_router)
app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": "Plateful",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
