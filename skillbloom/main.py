# main.py
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from skillbloom.config import settings
from skillbloom.config import build_sqlalchemy_db_url
from skillbloom.database import Base, engine
import skillbloom.models  # noqa: F401  # register all tables on Base.metadata
from skillbloom.api.routes.community import router as community_router
from skillbloom.api.routes.health import router as health_router
from skillbloom.api.routes.listings import router as listings_router
from skillbloom.routers import ai, assessments, auth, skills, users
from skillbloom.services.ai_client import GroqClient


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One pooled HTTP client for the AI provider, closed on shutdown.
        app.state.ai_client = GroqClient(settings)
        try:
            yield
        finally:
            await app.state.ai_client.close()
            app.state.ai_client = None

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(skills.router)
    application.include_router(assessments.router)
    application.include_router(ai.router)
    application.include_router(listings_router, prefix=settings.api_prefix)
    application.include_router(community_router, prefix=settings.api_prefix)

    # Shared databases get their schema from scripts/create_orm_tables.py.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
