from contextlib import asynccontextmanager
from pathlib import Path
import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from linkshort.api import links, redirect
from linkshort.core.config import Settings, load_settings
from linkshort.core.errors import ShortenerError, Unauthorized, ConfigurationError
from linkshort.core.logging_config import configure_logging
from linkshort.core.security import SecretVerifier
from linkshort.db.Connection import database
from linkshort.db.Models import models

logger = logging.getLogger("linkshort")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Shutting down gracefully...")
    app.state.engine.dispose()


def create_app(settings: Settings, engine=None) -> FastAPI:
    if engine is None:
        engine = database.build_engine(settings.db)
    models.Base.metadata.create_all(bind=engine)
    logger.info("Database models initialized/checked.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Minimal URL shortener with a shared password",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.verifier = SecretVerifier(settings.password)
    app.state.engine = engine
    app.state.SessionLocal = database.build_session_factory(engine)

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "healthy", "service": "linkshort"}

    resources = Path(settings.resources_dir)
    if resources.is_dir():
        app.mount("/resources", StaticFiles(directory=str(resources)), name="resources")

    app.include_router(links.router)
    app.include_router(links.build_prefixed_router(settings.prefix))
    # Catch-all redirect route goes last
    app.include_router(redirect.build_router(settings.prefix))

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        logger.warning(f"{request.url.path} -> {exc.status_code}: {exc}")
        if isinstance(exc, Unauthorized):
            return JSONResponse(status_code=exc.status_code, content={})
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


def run():
    import uvicorn

    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
    logging.getLogger().setLevel(settings.log_level)

    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    logger.info(f"URL shortener address prefix: /{settings.prefix}")
    logger.info(f"password: {settings.masked_password}")
    logger.info(f"using database {settings.db}")

    engine = database.build_engine(settings.db)
    if not database.verify_database_connection(engine):
        sys.exit(1)

    app = create_app(settings, engine=engine)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
