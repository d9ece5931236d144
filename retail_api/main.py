import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from retail_api.config import Settings, get_settings
from retail_api.core.constants import INTERNAL_ERROR_DETAIL, ROOT_MESSAGE
from retail_api.core.logging import setup_logging
from retail_api.database import build_engine, build_session_factory, init_schema
from retail_api.database.seed import seed_demo_data
from retail_api.routers import RESOURCE_ROUTERS, health_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own engine and session factory.

    Handlers reach the store only through ``app.state``, so every app built
    here (one per test, say) works against its own database.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    engine = build_engine(settings.DATABASE_URL)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        init_schema(engine)
        if settings.SEED_DEMO_DATA:
            with session_factory() as db:
                seed_demo_data(db)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_DETAIL})
        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "elapsed_ms": elapsed_ms,
            },
        )
        return response

    app.include_router(health_router)
    for router in RESOURCE_ROUTERS:
        app.include_router(router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        return {"message": ROOT_MESSAGE.format(prefix=settings.API_PREFIX)}

    return app


app = create_app()


__all__ = ["app", "create_app"]
