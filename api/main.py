import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api_docs import router as api_docs_router
from articles import router as articles_router
from core import db
from core.errors import register_error_handlers
from core.observability import setup_logging
from topics import router as topics_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    # Only the JSON routes below are served; no generated docs pages.
    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

    register_error_handlers(app)

    # Read-only API: browsers only ever need GET.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Static paths first so they win over the parameterized article route.
    app.include_router(api_docs_router.router, tags=["api"])
    app.include_router(topics_router.router, tags=["topics"])
    app.include_router(articles_router.router, tags=["articles"])
    return app


app = create_app()
