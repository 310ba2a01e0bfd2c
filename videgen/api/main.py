"""
FastAPI Application - Explainer Video Generation API.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from videgen import __version__
from videgen.config import AppConfig, load_config
from videgen.exceptions import PipelineError
from videgen.services import Pipeline, build_pipeline

from .exceptions import (
    generic_exception_handler,
    pipeline_error_handler,
    request_validation_handler,
)
from .routes import generate_router, health_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info("Starting Explainer Video API...")
    logger.info("=" * 60)

    app.state.config.log_status()

    logger.info(f"Artifacts served from {app.state.config.paths.temp_dir} at /temp")
    logger.info("Server ready! Endpoints under /api, health at /health")

    yield

    logger.info("Shutting down Explainer Video API...")


def create_app(
    config: Optional[AppConfig] = None,
    pipeline: Optional[Pipeline] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    config = config or load_config()
    pipeline = pipeline or build_pipeline(config)

    app = FastAPI(
        title="Explainer Video API",
        description="Topic to narrated explainer video: script, audio, images, assembly",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PipelineError, pipeline_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router)
    app.include_router(generate_router)

    # Mount the artifact root so locators like /temp/{project_id}/{file} resolve
    temp_dir = config.paths.temp_dir
    temp_dir.mkdir(parents=True, exist_ok=True)
    app.mount(config.pipeline.url_prefix, StaticFiles(directory=str(temp_dir)), name="temp")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "videgen.api.main:app",
        host="0.0.0.0",
        port=app.state.config.port,
        reload=False,
        log_level="info",
    )
