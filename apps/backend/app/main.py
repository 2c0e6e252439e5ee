import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .agent.manager import AgentManager
from .agent.providers.base import Provider
from .api import health_check, v1_router
from .core import settings, LLMConfig, setup_logging
from .core.exceptions import (
    client_input_error_handler,
    request_validation_error_handler,
    unhandled_exception_handler,
)
from .services.exceptions import ClientInputError

logger = logging.getLogger(__name__)


def create_app(provider: Optional[Provider] = None) -> FastAPI:
    """
    Build the application. The LLM configuration is validated during startup
    so a missing API key stops the process before it serves a request; pass
    `provider` to skip that and use an already-built provider instead.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if provider is not None:
            app.state.agent = AgentManager(provider=provider, timeout=settings.LLM_TIMEOUT_SECONDS)
        else:
            config = LLMConfig.from_settings(settings)
            app.state.agent = AgentManager(config=config)
        logger.info(f"{settings.PROJECT_NAME} ready, provider={app.state.agent.provider_name}")
        yield
        logger.info("Application shutting down.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        # Credentials only for an explicit origin list, never with the wildcard
        allow_credentials="*" not in settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_check, prefix="/api")
    app.include_router(v1_router, prefix="/api")

    return app


app = create_app()
