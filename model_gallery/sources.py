"""Data sources the catalog documents can be read from."""
import logging
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Optional

import httpx

from .errors import DataUnavailable

logger = logging.getLogger(__name__)


class CatalogSource(ABC):
    """Reads named documents (``models.json``, ``metadata.json``) as raw bytes."""

    @abstractmethod
    def read(self, name: str) -> bytes:
        """Return the document contents or raise ``DataUnavailable``."""

    @abstractmethod
    def describe(self, name: str) -> str:
        """Human readable location of a document, used in logs and errors."""


class FileSource(CatalogSource):
    """Documents on the local filesystem, relative to a working directory."""

    def __init__(self, root: str = "..", cwd: Optional[str] = None):
        base = Path(cwd) if cwd else Path.cwd()
        self.root = (base / root).resolve()

    def describe(self, name: str) -> str:
        return str(self.root / name)

    def read(self, name: str) -> bytes:
        path = self.root / name
        logger.debug(f"Reading {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise DataUnavailable(str(path), e) from e


class BundledSource(CatalogSource):
    """Static assets shipped inside a Python package."""

    def __init__(self, package: str = "model_gallery", directory: str = "static"):
        self.package = package
        self.directory = directory

    def describe(self, name: str) -> str:
        return f"package://{self.package}/{self.directory}/{name}"

    def read(self, name: str) -> bytes:
        location = self.describe(name)
        logger.debug(f"Reading bundled asset {location}")
        try:
            return resources.files(self.package).joinpath(self.directory, name).read_bytes()
        except (ModuleNotFoundError, OSError) as e:
            raise DataUnavailable(location, e) from e


class HttpSource(CatalogSource):
    """Documents fetched over HTTP, relative to a base URL."""

    def __init__(self, base_url: str, client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/") + "/"
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def describe(self, name: str) -> str:
        return f"{self.base_url}{name.lstrip('/')}"

    def read(self, name: str) -> bytes:
        url = self.describe(name)
        logger.debug(f"Fetching {url}")
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise DataUnavailable(url, e) from e
        return response.content

    def close(self):
        self._client.close()


def build_source(settings) -> CatalogSource:
    """Create the data source selected by configuration."""
    kind = settings.data_source
    if kind == "file":
        return FileSource(settings.data_root)
    if kind == "bundled":
        return BundledSource(settings.bundle_package, settings.bundle_dir)
    if kind == "http":
        if not settings.data_url:
            raise ValueError("GALLERY_DATA_URL must be set for the http data source")
        return HttpSource(settings.data_url, timeout=settings.http_timeout)
    raise ValueError(f"Unknown data source: {kind}")
