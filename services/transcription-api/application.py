"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from transcription_common.logging import setup_logging

from config import AppConfig, load_config
from dependencies import ServiceResources, build_resources
from routes import health_router, history_router, transcriptions_router


def create_app(
    config: AppConfig | None = None, resources: ServiceResources | None = None
) -> FastAPI:
    """
    Builds the application.

    Resources are created when the app starts serving and released on
    shutdown. Resources passed in by the caller stay owned by the caller.
    """
    config = config or load_config()
    logger = setup_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = resources is None
        app.state.resources = build_resources(config) if owned else resources
        logger.info("Transcription service started", extra={"port": config.server.port})
        try:
            yield
        finally:
            if owned:
                app.state.resources.close()

    app = FastAPI(title="Audio Transcription Service", lifespan=lifespan)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.server.allowed_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(transcriptions_router)
    app.include_router(history_router)
    app.include_router(health_router)
    return app
