import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from filmlibrary.core import config
from filmlibrary.core.auth import authorize_request, load_enforcer
from filmlibrary.core.database import ensure_schema
from filmlibrary.core.errors import register_exception_handlers
from filmlibrary.core.logging import configure_logging
from filmlibrary.routers.actors import router as actors_router
from filmlibrary.routers.docs import router as docs_router
from filmlibrary.routers.movies import router as movies_router
from filmlibrary.routers.users import router as users_router
from filmlibrary.services.deps import create_redis

logger = logging.getLogger(__name__)


def create_app(enforcer=None, redis_client=None, create_schema: bool = config.CREATE_SCHEMA) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_schema:
            ensure_schema()
        yield

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="API server for FilmLibrary",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.enforcer = enforcer or load_enforcer(config.RBAC_MODEL, config.RBAC_POLICY)
    app.state.redis = redis_client if redis_client is not None else create_redis()

    # the last middleware added runs first: logging -> CORS -> auth/policy -> routing
    app.middleware("http")(authorize_request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"], allow_credentials=True,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("[%s] %s status=%s time_answer=%.2fms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.get("/health", include_in_schema=False)
    def health():
        return {"ok": True}

    register_exception_handlers(app)

    app.include_router(users_router)
    app.include_router(actors_router)
    app.include_router(movies_router)
    app.include_router(docs_router)

    return app


def main():
    uvicorn.run("filmlibrary.main:create_app", factory=True, host=config.SERVER_HOST, port=config.SERVER_PORT)


if __name__ == "__main__":
    main()
