"""Page loaders - data for the home, gallery and model detail pages.

Each loader reads the catalog once per call and degrades to an empty result
plus a localized message when the data is unavailable, so one broken
document never aborts the rendering of other pages.
"""
import logging
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .catalog_loader import CatalogLoader
from .errors import DataUnavailable, ModelNotFound
from .schemas import AnimationData, BuildMetadata, ModelData
from .url import AssetUrlResolver

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: Dict[str, str] = {
    "metadata_unavailable": "メタデータの読み込みに失敗しました。",
    "models_unavailable": "モデルデータの読み込みに失敗しました。",
    "model_not_found": "モデルが見つかりません",
}


class ModelView(BaseModel):
    """A catalog entry with its texture resolved to a servable URL."""

    model_config = ConfigDict(frozen=True)

    name: str
    materials: Tuple[str, ...]
    texture_url: Optional[str] = None
    added_date: str
    author: Optional[str] = None
    animation: Optional[AnimationData] = None

    @classmethod
    def from_model(cls, model: ModelData, resolver: AssetUrlResolver) -> "ModelView":
        texture = model.texture_path_or_url
        return cls(
            name=model.name,
            materials=model.materials,
            texture_url=resolver(texture) if texture is not None else None,
            added_date=model.added_date,
            author=model.author,
            animation=model.animation,
        )


class HomePage(BaseModel):
    metadata: Optional[BuildMetadata] = None
    error: Optional[str] = None


class GalleryPage(BaseModel):
    models: List[ModelView] = []
    error: Optional[str] = None


class ModelDetailPage(BaseModel):
    model: Optional[ModelView] = None
    status: int = 200
    error: Optional[str] = None


class PageLoaders:
    """Builds page data from the catalog loader and the URL resolver."""

    def __init__(
        self,
        loader: CatalogLoader,
        resolver: AssetUrlResolver,
        messages: Optional[Dict[str, str]] = None,
    ):
        self.loader = loader
        self.resolver = resolver
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}

    def home(self) -> HomePage:
        try:
            metadata = self.loader.load_metadata()
        except DataUnavailable as e:
            logger.error(f"Failed to load metadata: {e}")
            return HomePage(error=self.messages["metadata_unavailable"])

        if metadata.download_url:
            metadata = metadata.model_copy(update={"download_url": self.resolver(metadata.download_url)})
        return HomePage(metadata=metadata)

    def gallery(self) -> GalleryPage:
        try:
            catalog = self.loader.load_catalog()
        except DataUnavailable as e:
            logger.error(f"Failed to load models: {e}")
            return GalleryPage(error=self.messages["models_unavailable"])

        return GalleryPage(models=[ModelView.from_model(m, self.resolver) for m in catalog.list_models()])

    def model_detail(self, name: str) -> ModelDetailPage:
        try:
            model = self.loader.load_catalog().get_model(name)
        except ModelNotFound:
            return ModelDetailPage(status=404, error=self.messages["model_not_found"])
        except DataUnavailable as e:
            logger.error(f"Failed to load model {name}: {e}")
            return ModelDetailPage(status=500, error=self.messages["models_unavailable"])

        return ModelDetailPage(model=ModelView.from_model(model, self.resolver))

    def entries(self) -> List[Dict[str, str]]:
        """Route parameters of every model detail page to prerender."""
        try:
            names = self.loader.load_catalog().model_names()
        except DataUnavailable as e:
            logger.error(f"Failed to generate entries: {e}")
            return []
        return [{"id": name} for name in names]
