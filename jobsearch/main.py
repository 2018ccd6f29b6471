# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobsearch.config import build_sqlalchemy_db_url, settings
from jobsearch.database import Base, engine
from jobsearch.models import Company, Job  # noqa: F401
from jobsearch.api.routes.health import router as health_router
from jobsearch.api.routes.jobs import router as jobs_router


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)
    application.include_router(jobs_router, prefix=settings.api_prefix)

    # Postgres schema is managed by migrations; only sqlite gets create_all.
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
