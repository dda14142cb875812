"""FastAPI application entry point and composition root."""

import logging
import time
import tomllib
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapter.memory.user_repository import InMemoryUserRepository
from adapter.mongodb.connection import connect
from adapter.mongodb.indexes import ensure_all_indexes
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import MONGODB_BACKEND, Settings
from api.response import send_response
from api.routes import health, users
from port.user_repository import UserRepository
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "user-service"
SERVICE_NAME = "User Service API"

# Sent on every response (helmet-style defaults for a JSON API)
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-Permitted-Cross-Domain-Policies": "none",
}


def _read_version() -> str:
    """Installed package metadata first, pyproject.toml for a source checkout."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pyproject = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]


VERSION = _read_version()


class StartupError(RuntimeError):
    """The configured repository backend could not be initialised."""


def _wire_repository(app: FastAPI, settings: Settings) -> None:
    """Pick the adapter named by settings and attach it to app.state."""
    if settings.repository_backend != MONGODB_BACKEND:
        app.state.user_repository = InMemoryUserRepository()
        app.state.repository_backend = settings.repository_backend
        logger.warning("Using in-memory user repository (data is lost on restart)")
        return

    try:
        client = connect(settings.mongo_url)
    except PyMongoError as e:
        logger.error("[MONGODB] Initial connection failed", extra={"error": str(e)[:200]})
        raise StartupError("MongoDB connection failed") from e

    db = client[settings.database_name]
    if ensure_all_indexes(db):
        logger.info("MongoDB indexes verified/created successfully")
    else:
        logger.warning("Failed to create some MongoDB indexes")

    app.state.mongo_client = client
    app.state.user_repository = MongoUserRepository(db)
    app.state.repository_backend = settings.repository_backend


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: wire the repository on startup, release it on shutdown."""
    if getattr(app.state, 'user_repository', None) is None:
        _wire_repository(app, app.state.settings)
    logger.info(
        "Server starting",
        extra={"environment": app.state.settings.environment, "port": app.state.settings.port},
    )

    yield  # App runs here

    client = getattr(app.state, 'mongo_client', None)
    if client is not None:
        client.close()
        app.state.mongo_client = None


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def _install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            message = "Route not found"
        else:
            message = str(exc.detail)
        return send_response(exc.status_code, False, message, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return send_response(400, False, _describe_validation_error(exc))


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Credentials cannot be combined with a wildcard origin
    if settings.cors_origins == "*":
        origins, allow_credentials = ["*"], False
        if settings.is_production:
            logger.warning("CORS configured with wildcard origin ('*') in production")
    else:
        origins = [origin.strip() for origin in settings.cors_origins.split(",")]
        allow_credentials = True

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "durationMs": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response

    # Swagger UI and ReDoc pull scripts from a CDN
    docs_paths = {app.docs_url, app.redoc_url, app.swagger_ui_oauth2_redirect_url}

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            if name == "Content-Security-Policy" and request.url.path in docs_paths:
                continue
            response.headers.setdefault(name, value)
        if settings.is_production:
            response.headers.setdefault("Strict-Transport-Security", "max-age=15552000; includeSubDomains")
        return response


def create_app(settings: Settings | None = None, repository: UserRepository | None = None) -> FastAPI:
    """Build the application.

    ``repository`` bypasses backend selection; tests use it to inject an adapter.
    """
    settings = settings or Settings.from_env()
    setup_structured_logging(settings.log_level)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Layered user service: entity, port, adapters, use cases and controllers",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = None
    app.state.user_repository = repository
    if repository is not None:
        app.state.repository_backend = 'custom'

    _install_middleware(app, settings)
    _install_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return send_response(200, True, "Welcome to the User Service API", {
            "service": SERVICE_NAME,
            "version": VERSION,
        })

    return app


app = create_app()


def run():
    """Console entry point: serve ``app`` with uvicorn on the configured port."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        access_log=False  # requests are logged by log_requests
    )


if __name__ == "__main__":
    run()
