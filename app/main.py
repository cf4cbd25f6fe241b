# app/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.api.v1.api import api_router
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error."},
    )


def create_application() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    # ---------- DATABASE ----------
    init_db()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ERRORS ----------
    app.add_exception_handler(SQLAlchemyError, handle_database_error)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info("%s %s ready (database: %s)", settings.PROJECT_NAME, settings.VERSION,
                settings.sqlalchemy_url.render_as_string(hide_password=True))
    return app


app = create_application()
