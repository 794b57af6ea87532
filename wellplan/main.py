"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wellplan.api.v1 import api_router
from wellplan.core.config import get_settings
from wellplan.core.errors import ConfigurationError, PersistenceError
from wellplan.db.session import engine
from wellplan.services.content import ContentClient

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build injected collaborators; shutdown: cleanup."""
    app.state.content_client = ContentClient.from_settings(settings)
    if app.state.content_client is None:
        logger.info("OPENAI_API_KEY not set; content generation disabled")
    yield
    if app.state.content_client is not None:
        await app.state.content_client.close()
    await engine.dispose()


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"field": exc.field, "detail": exc.detail})


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Persistence failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def create_application() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug, localhost in dev, CORS_ORIGINS env in production
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:8081"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)

    @app.get("/")
    def root():
        return {"status": "ok", "message": "Wellplan API"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
