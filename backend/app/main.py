from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import get_logger
from app.db.base import Base
from app.db.session import create_db_engine, create_session_factory

# Import all models so SQLAlchemy can discover them for table creation
from app.models import User, Job  # noqa: F401

# Import API router
from app.api.api import api_router
from app.services.media import build_media_uploader

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the database engine and media uploader for the process lifetime."""
    engine = create_db_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.media_uploader = build_media_uploader()

    if not app.state.media_uploader.is_configured:
        logger.warning("Cloudinary credentials not set - file uploads will fail")

    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    yield

    engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="Job portal API: accounts, profiles and job postings",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# CORS Middleware - allowlist from env (comma-separated)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include API router with /api/v1 prefix
app.include_router(api_router, prefix="/api/v1")
