"""Hello OpenAPI Service - FastAPI Application Entry Point

A minimal FastAPI service with one greeting endpoint, publishing its
OpenAPI document and a self-hosted Swagger UI explorer.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.routers import hello
from app.routers.docs import build_docs_router
from app.services.openapi import build_api_description
from app.services.swagger_assets import SwaggerAssets
from config import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("hello-openapi")


def create_app(settings: Settings = settings) -> FastAPI:
    """Build the application, its route table and its API description."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        logger.info(
            "Starting Hello OpenAPI Service",
            extra={"environment": settings.environment, "port": settings.port},
        )
        logger.info(f"OpenAPI document: {settings.openapi_url}")
        logger.info(f"Swagger UI: {settings.swagger_index_url}")

        yield

        logger.info("Shutting down Hello OpenAPI Service")

    # FastAPI's built-in docs routes are replaced by the docs router.
    app = FastAPI(
        title=settings.api_title,
        description="Says hello to a named person of a given age",
        version=settings.api_version,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
    )

    # Included without a prefix so the description check can read their routes.
    routers = [hello.router, build_docs_router(settings)]
    for router in routers:
        app.include_router(router)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors.

        Logs the error and returns a user-friendly message.
        Never exposes internal error details to clients.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}",
            extra={
                "path": request.url.path,
                "method": request.method,
            },
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "internal_error",
                "message": "An unexpected error occurred. Please try again.",
            },
        )

    # Built once, read-only for the lifetime of the process.
    app.state.api_description = build_api_description(
        app,
        [app.router, *routers],
        title=app.title,
        version=app.version,
        description=app.description,
    )

    def openapi() -> dict:
        return app.state.api_description

    app.openapi = openapi
    app.state.swagger_assets = SwaggerAssets(
        openapi_url=settings.openapi_url,
        mount_path=settings.swagger_path,
        title=f"{settings.api_title} - Swagger UI",
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
