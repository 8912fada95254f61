# taskboard/main.py

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from taskboard.api.v1.api import api_router
from taskboard.core.config import settings
from taskboard.core.errors import register_exception_handlers
from taskboard.core.logging_setup import setup_logging
from taskboard.db.init_db import init_db

logger = logging.getLogger(__name__)


def create_application(*, create_tables: bool = True) -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- REQUEST LOG (dev only) ----------
    if settings.is_development:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    def root():
        return PlainTextResponse("API is running...")

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    if create_tables:
        init_db()

    logger.info("%s started in %s mode", settings.PROJECT_NAME, settings.environment)
    return app


app = create_application()
