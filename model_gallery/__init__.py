"""Model Gallery - catalog resolution for the model gallery site."""
from .catalog import ModelCatalog
from .catalog_loader import CatalogLoader
from .errors import CatalogError, DataUnavailable, DuplicateModelName, ModelNotFound
from .url import AssetUrlResolver, resolve

__all__ = [
    "AssetUrlResolver",
    "CatalogError",
    "CatalogLoader",
    "DataUnavailable",
    "DuplicateModelName",
    "ModelCatalog",
    "ModelNotFound",
    "resolve",
]
