import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from tlog.repos.post_store import PostStore
from tlog.routers import posts
from tlog.schemas.site import SiteConfig
from tlog.services.content_loader import ContentLoader
from tlog.services.file_watcher import PollingFileWatcher
from tlog.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    loader: ContentLoader = app.state.loader
    current_settings: Settings = app.state.settings

    # DirectoryUnavailable / ValidationRejected abort startup
    loader.load()

    watcher_thread = None
    if current_settings.WATCH_CONTENT:
        watcher_thread = loader.start_watching(
            PollingFileWatcher(loader.content_dir, current_settings.WATCH_INTERVAL)
        )

    try:
        yield
    finally:
        if watcher_thread is not None:
            loader.stop_watching()
            watcher_thread.join(timeout=10)
            logger.info("Content watcher exited gracefully")


def create_app(settings_obj: Settings = settings) -> FastAPI:
    app = FastAPI(title="tlog", description="Content API for a tlog blog")
    app.state.settings = settings_obj
    app.state.site_config = settings_obj.site_config
    app.state.store = PostStore()
    app.state.loader = ContentLoader(
        settings_obj.content_dir, app.state.store, root=settings_obj.content_dir
    )
    app.router.lifespan_context = lifespan

    app.include_router(posts.router)

    @app.get("/")
    async def root():
        return {"message": "tlog is running"}

    @app.get("/config", response_model=SiteConfig)
    async def site_config(request: Request):
        return request.app.state.site_config

    return app


app = create_app()
