"""Photo Library API - FastAPI entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .application.services import ActorResolver
from .config import CORS_MAX_AGE, Settings
from .errors import PhotoLibraryError, ValidationError
from .infrastructure.database import open_store
from .infrastructure.repositories import UserRepository
from .infrastructure.storage import ObjectStorage, get_storage_config, get_storage_from_config
from .logging_config import setup_logging
from .middleware import ActorMiddleware
from .routes import router as api_router
from .services.tokens import SessionTokenService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[ObjectStorage] = None
) -> FastAPI:
    """Build the application.

    Args:
        settings: Runtime settings (default: read from the environment)
        storage: Object storage backend (default: from STORAGE_* variables)
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the key/value store and object storage for the app's lifetime."""
        store = await open_store(settings.database_path)
        token_service = SessionTokenService(settings.token_secret, settings.token_ttl_seconds)

        app.state.store = store
        app.state.storage = storage or get_storage_from_config(get_storage_config())
        app.state.token_service = token_service
        app.state.actor_resolver = ActorResolver(
            UserRepository(store),
            token_service,
            admin_secret=settings.admin_secret
        )
        if not settings.admin_secret:
            logger.info("No admin secret configured; admin access disabled")
        yield
        await store.close()

    app = FastAPI(title="Photo Library", lifespan=lifespan)

    # Add middleware (order matters - first added = last executed)
    app.add_middleware(ActorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=CORS_MAX_AGE,
    )

    @app.exception_handler(PhotoLibraryError)
    async def photo_library_error_handler(request: Request, exc: PhotoLibraryError):
        if exc.status_code >= 500:
            logger.error("%s on %s %s: %s", type(exc).__name__, request.method,
                         request.url.path, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Schema failures answer 400 with the first problem as text."""
        message = "Invalid request"
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            if field:
                message = f"{message}: {field}"
            message = f"{message}: {first.get('msg', '')}"
        return PlainTextResponse(message, status_code=ValidationError.status_code)

    app.include_router(api_router)
    return app


app = create_app()
