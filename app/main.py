# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Tryst API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app import __version__
from app.auth import TokenSigner
from app.auth import routes as auth_routes
from app.config import Settings, settings as default_settings
from app.dependencies import build_user_store, run_in_worker
from app.exceptions import (
    TrystException,
    tryst_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import bookings, health
from lib.user_store import UserStore, UserStoreError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", "X-Requested-With", "Accept"]


async def connect_user_store(store: UserStore, timeout: float) -> bool:
    """
    Check the store is reachable, giving up after timeout seconds.

    Failures are logged, never raised: the API keeps serving so the error
    shows up on /api/health/ready.
    """
    try:
        await asyncio.wait_for(run_in_worker(store.ping), timeout=timeout)
    except asyncio.TimeoutError:
        logger.error(f"Database connection timed out after {timeout}s")
        return False
    except UserStoreError as e:
        logger.error(f"Database connection failed: {e}")
        return False

    logger.info("Database connected")
    return True


def create_app(
    user_store: UserStore | None = None,
    token_signer: TokenSigner | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        user_store: Store to use. When omitted, the startup lifespan builds
            one from settings.
        token_signer: Session token signer. Defaults to one built from settings.
        app_settings: Settings override, mainly for tests.

    Returns:
        FastAPI: Configured application
    """
    cfg = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup: build the user store if none was injected, then try to
        reach the database within DB_CONNECT_TIMEOUT_SECONDS.
        """
        logger.info(f"Starting Tryst API in {cfg.ENVIRONMENT} mode")

        if app.state.user_store is None:
            try:
                app.state.user_store = build_user_store(cfg)
            except UserStoreError as e:
                logger.error(f"Could not create user store: {e}")

        if app.state.user_store is not None:
            await connect_user_store(app.state.user_store, cfg.DB_CONNECT_TIMEOUT_SECONDS)

        yield

        logger.info("Shutting down Tryst API")

    app = FastAPI(
        title="Tryst API",
        description="Event registration backend: register, log in, book events.",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Auth", "description": "Registration and login"},
            {"name": "Bookings", "description": "Book events for the logged-in user"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )

    app.state.user_store = user_store
    app.state.token_signer = token_signer or TokenSigner.from_settings(cfg)
    app.state.settings = cfg
    app.state.bcrypt_rounds = cfg.BCRYPT_ROUNDS

    # =========================================================================
    # Middleware
    # =========================================================================

    # Any origin is reflected back, with credentials allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Added last so it runs first: every OPTIONS request gets an empty 200,
    # including ones the CORS middleware would not treat as a preflight.
    # Requests without an Origin header get a wildcard allow-origin.
    @app.middleware("http")
    async def answer_preflight(request: Request, call_next):
        if request.method != "OPTIONS":
            response = await call_next(request)
            if "origin" not in request.headers:
                response.headers.setdefault("Access-Control-Allow-Origin", "*")
            return response
        return Response(
            status_code=200,
            headers={
                "Access-Control-Allow-Origin": request.headers.get("origin", "*"),
                "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
                "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
                "Access-Control-Allow-Credentials": "true",
                "Vary": "Origin",
            },
        )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TrystException, tryst_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(auth_routes.router, prefix="/api", tags=["Auth"])
    app.include_router(bookings.router, prefix="/api", tags=["Bookings"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Tryst API",
            "version": __version__,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


# Module-level app for uvicorn; the store is built at startup
app = create_app()
