import logging

from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from uploader import __version__
from uploader.assets import select_static_dir, select_template_loader
from uploader.config.settings import Settings
from uploader.errors import UploaderError, handle_uploader_errors
from uploader.middleware import handle_broad_exceptions, log_requests
from uploader.routers.files import router as files_router
from uploader.storage import StoreDirectory
from uploader.templates import PageRenderer

# Set up logging
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the uploader application.

    Everything that can fail for configuration reasons (store directory,
    templates, static directory) is resolved here and raises ``StartupError``.
    """
    settings = settings or Settings()

    store = StoreDirectory(settings.store_dir)
    store.ensure_exists()
    renderer = PageRenderer(select_template_loader(settings.embed_assets))
    static_dir = select_static_dir(settings.embed_assets)

    app = FastAPI(
        title="Uploader",
        summary="Upload files to a directory and list them",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.renderer = renderer

    app.include_router(files_router, tags=["files"])
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    app.mount("/files", StaticFiles(directory=store.path), name="files")

    app.add_exception_handler(UploaderError, handle_uploader_errors)
    app.middleware("http")(handle_broad_exceptions)
    # Last registered runs outermost
    app.middleware("http")(log_requests)

    logger.info(f"Serving {store.path} (bundled assets: {settings.embed_assets})")
    return app
