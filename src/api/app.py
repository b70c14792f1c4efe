"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error rendering and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.chat import router as chat_router
from src.api.routes import router as documents_router
from src.errors import INVALID_REQUEST_MESSAGE, NO_FILE_MESSAGE, GatewayError, UpstreamError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown."""
    logger.info("Starting LexAI API...")
    yield
    logger.info("Shutting down LexAI API...")


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Render a gateway failure as ``{"error": message}``.

    Args:
        request: The failed request.
        exc: The gateway error carrying status and user-facing message.

    Returns:
        JSONResponse with the error's status code.
    """
    if isinstance(exc, UpstreamError):
        logger.error(f"{request.url.path}: upstream failed with {exc.status_code}")
    elif exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a 400 ``{"error": message}``.

    Args:
        request: The failed request.
        exc: FastAPI's validation error listing the offending fields.

    Returns:
        JSONResponse in the same shape as every other client error.
    """
    fields = {str(part) for error in exc.errors() for part in error.get("loc", ())}
    message = NO_FILE_MESSAGE if "file" in fields else INVALID_REQUEST_MESSAGE
    logger.warning(f"{request.url.path}: {message} ({exc.errors()})")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="LexAI API",
        description=(
            "Legal-advice chat assistant for Indian law. Analyzes uploaded "
            "documents (text, Word, PDF, images via OCR) and answers questions "
            "with cited legal sources through an OpenAI-compatible model."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.add_exception_handler(GatewayError, gateway_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)

    application.include_router(documents_router)
    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "lexai"}

    return application


app = create_app()
