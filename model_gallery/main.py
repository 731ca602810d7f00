"""Model Gallery Service - Main entry point."""
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException

from .catalog_loader import CatalogLoader
from .config import Settings
from .pages import GalleryPage, HomePage, ModelView, PageLoaders
from .sources import build_source
from .url import AssetUrlResolver

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one set of settings."""
    settings = settings or Settings.from_env()

    loader = CatalogLoader(
        build_source(settings),
        models_file=settings.models_file,
        metadata_file=settings.metadata_file,
        cache=settings.cache,
    )
    pages = PageLoaders(loader, AssetUrlResolver(settings.base_path))

    app = FastAPI(
        title="Model Gallery",
        description="Catalog data for the model gallery pages",
        version="0.2.0"
    )
    app.state.settings = settings
    app.state.loader = loader
    app.state.pages = pages

    @app.on_event("startup")
    async def startup_event():
        """Log configuration on startup."""
        logger.info("Starting Model Gallery")
        logger.info(f"Base path: {settings.base_path or '/'}")
        logger.info(f"Data source: {settings.data_source}")
        logger.info(f"Models: {loader.source.describe(settings.models_file)}")
        logger.info(f"Metadata: {loader.source.describe(settings.metadata_file)}")
        logger.info(f"Cache enabled: {settings.cache}")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Release the data source."""
        close = getattr(loader.source, "close", None)
        if close is not None:
            close()

    @app.get("/healthz")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/metadata", response_model=HomePage)
    def get_metadata():
        """Build metadata for the home page."""
        return pages.home()

    @app.get("/api/models", response_model=GalleryPage)
    def list_models():
        """List all models for the gallery."""
        return pages.gallery()

    @app.get("/api/models/{name}", response_model=ModelView)
    def get_model(name: str):
        """Get details for a specific model."""
        page = pages.model_detail(name)
        if page.model is None:
            raise HTTPException(status_code=page.status, detail=page.error)
        return page.model

    @app.get("/api/entries", response_model=List[Dict[str, str]])
    def list_entries():
        """Route parameters for prerendering model pages."""
        return pages.entries()

    return app


app = create_app()
