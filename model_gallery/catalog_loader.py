"""Catalog Loader - reads and validates models.json and metadata.json."""
import json
import logging
import threading
from typing import Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .catalog import ModelCatalog
from .errors import DataUnavailable, DuplicateModelName
from .schemas import BuildMetadata, ModelsCatalog
from .sources import CatalogSource

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CatalogLoader:
    """Loads the catalog documents from a configured source.

    Callers never see which kind of source is active. Every failure is
    reported as ``DataUnavailable``; nothing is retried.
    """

    def __init__(
        self,
        source: CatalogSource,
        models_file: str = "models.json",
        metadata_file: str = "metadata.json",
        cache: bool = False,
    ):
        self.source = source
        self.models_file = models_file
        self.metadata_file = metadata_file
        self.cache = cache
        self._cached: Dict[str, BaseModel] = {}
        self._lock = threading.Lock()

    def load_models(self) -> ModelsCatalog:
        """Load models.json."""
        return self._load(self.models_file, ModelsCatalog, self._check_unique_names)

    def load_metadata(self) -> BuildMetadata:
        """Load metadata.json."""
        return self._load(self.metadata_file, BuildMetadata)

    def load_catalog(self) -> ModelCatalog:
        """Load models.json wrapped for querying."""
        return ModelCatalog(self.load_models())

    def _load(self, name: str, record_type: Type[RecordT], check=None) -> RecordT:
        if not self.cache:
            return self._read(name, record_type, check)

        cached = self._cached.get(name)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._cached.get(name)
            if cached is None:
                cached = self._read(name, record_type, check)
                self._cached[name] = cached
        return cached

    def _read(self, name: str, record_type: Type[RecordT], check=None) -> RecordT:
        location = self.source.describe(name)
        raw = self.source.read(name)

        try:
            text = raw.decode("utf-8")
            data = json.loads(text)
            record = record_type.model_validate(data)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError, ValidationError) as e:
            logger.error(f"Invalid {name} at {location}: {e}")
            raise DataUnavailable(location, e) from e

        if check is not None:
            check(location, record)

        logger.info(f"Loaded {name} from {location}")
        return record

    @staticmethod
    def _check_unique_names(location: str, catalog: ModelsCatalog):
        seen = set()
        for model in catalog.models:
            if model.name in seen:
                logger.error(f"Duplicate model name in {location}: {model.name}")
                raise DuplicateModelName(location, model.name)
            seen.add(model.name)
