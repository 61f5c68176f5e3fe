import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from auth import router as auth_router
from core import settings
from core.errors import register_error_handlers
from core.observability import setup_logging
from core.store import ContentStore, build_demo_store

logger = logging.getLogger(__name__)


def create_store() -> ContentStore:
    if settings.seed_demo():
        return build_demo_store()
    return ContentStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level())
    # Tests may install their own store before startup.
    if getattr(app.state, "store", None) is None:
        app.state.store = create_store()
    logger.info("content_api_started articles=%s", sum(1 for _ in app.state.store.iter_articles()))
    try:
        yield
    finally:
        logger.info("content_api_stopped")


def create_app(store: ContentStore | None = None) -> FastAPI:
    app = FastAPI(title="content-acl api", lifespan=lifespan)
    app.state.store = store

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(auth_router.router, tags=["auth"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def serve() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    serve()
