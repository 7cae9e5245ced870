# main.py
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from jobboard.api.error_handlers import register_error_handlers
from jobboard.api.limiter import build_limiter, rate_limit_handler
from jobboard.api.routes.health import router as health_router
from jobboard.config import Settings, build_sqlalchemy_db_url, get_settings, should_create_tables
from jobboard.database import Database
from jobboard.routers import applications, auth, jobs


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(build_sqlalchemy_db_url(settings))
        # Avoid accidental schema changes in shared MySQL databases.
        # For local/test sqlite usage, auto-create ORM tables is still convenient.
        if should_create_tables(settings):
            database.create_all()
        app.state.database = database
        try:
            yield
        finally:
            database.dispose()

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
    )
    application.state.settings = settings

    application.state.limiter = build_limiter(settings)
    application.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    application.add_middleware(SlowAPIMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(application, settings)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    application.include_router(jobs.router, prefix=f"{settings.api_prefix}/jobs", tags=["jobs"])
    application.include_router(
        applications.router,
        prefix=f"{settings.api_prefix}/applications",
        tags=["applications"],
    )
    return application


app = create_app()
