"""
FastAPI application factory.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .core.config import get_settings
from .core.database import close_db, init_db
from .core.errors import AppError, ValidationError, format_validation_errors
from .core.flags import dev_login_enabled, get_flags
from .api.router import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting %s (env=%s)", settings.app_name, settings.env)

    await init_db()

    from .tools.registry import get_tool_names, init_tools
    init_tools()

    from .core import database
    from .services import llm
    flags = get_flags()
    logger.info(
        "Capabilities: db=%s ai=%s provider=%s guest=%s dev_login=%s",
        database.is_configured(), llm.is_configured(), flags.llm_provider,
        flags.enable_guest_mode, dev_login_enabled(),
    )
    logger.info("Tools: %s", ", ".join(get_tool_names()))
    logger.info("%s is ready", settings.app_name)

    yield

    await llm.close_client()
    await close_db()
    logger.info("%s shut down", settings.app_name)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Indian-context AI assistant",
        version=settings.app_version,
        docs_url="/docs" if settings.env == "development" else None,
        redoc_url="/redoc" if settings.env == "development" else None,
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────────────
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Session cookie ───────────────────────────────────────────
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie="swadesh_session",
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.env == "production",
    )

    # ── Request log ──────────────────────────────────────────────
    if get_flags().log_requests:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            if request.url.path.startswith("/api"):
                logger.info(
                    "%s %s %s in %dms",
                    request.method, request.url.path, response.status_code,
                    (time.perf_counter() - start) * 1000,
                )
            return response

    # ── Errors ───────────────────────────────────────────────────
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.__cause__ or exc)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(ValidationError.status_code, format_validation_errors(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "Internal server error")

    # ── Routes ───────────────────────────────────────────────────
    app.include_router(router)

    return app
