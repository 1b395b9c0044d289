"""Root API router, middleware registration, and domain exception handlers."""

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from address_news.api.middleware import SecurityHeadersMiddleware, setup_cors
from address_news.core.config import Settings
from address_news.core.errors import AddressNotFoundError, InvalidInputError, SearchError, StorageError


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from address_news.api.routes.addresses import addresses_router

    root_router = APIRouter(prefix=settings.api_prefix)
    root_router.include_router(addresses_router)
    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)


async def _invalid_input_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "message": str(exc)},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses.

    Args:
        app: The FastAPI application.
    """
    app.add_exception_handler(InvalidInputError, _invalid_input_handler)
    app.add_exception_handler(AddressNotFoundError, _not_found_handler)
    app.add_exception_handler(StorageError, _internal_error_handler)
    app.add_exception_handler(SearchError, _internal_error_handler)
