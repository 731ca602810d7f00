"""Model Catalog - answers lookups against a loaded models.json."""
import logging
from typing import Iterator, List

from .errors import ModelNotFound
from .schemas import ModelData, ModelsCatalog

logger = logging.getLogger(__name__)


class ModelCatalog:
    """Read-only view over a loaded catalog.

    Name uniqueness is checked by the loader, so lookups are unambiguous.
    """

    def __init__(self, catalog: ModelsCatalog):
        self._models = catalog.models

    def list_models(self) -> List[ModelData]:
        """List all models in gallery order."""
        return list(self._models)

    def get_model(self, name: str) -> ModelData:
        """Get a model by its exact, case-sensitive name."""
        for model in self._models:
            if model.name == name:
                return model
        logger.info(f"Model not found: {name}")
        raise ModelNotFound(name)

    def model_names(self) -> List[str]:
        """Names of all models in gallery order, for static route generation."""
        return [model.name for model in self.list_models()]

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[ModelData]:
        return iter(self._models)

    def __contains__(self, name: object) -> bool:
        return any(model.name == name for model in self._models)
