"""Configuration read once from the environment at startup."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DATA_SOURCES = ("file", "bundled", "http")

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Gallery settings."""

    base_path: str = ""
    data_source: str = "file"
    data_root: str = ".."
    data_url: Optional[str] = None
    bundle_package: str = "model_gallery"
    bundle_dir: str = "static"
    models_file: str = "models.json"
    metadata_file: str = "metadata.json"
    cache: bool = False
    http_timeout: float = 10.0

    def __post_init__(self):
        if self.data_source not in DATA_SOURCES:
            raise ValueError(
                f"GALLERY_DATA_SOURCE must be one of {', '.join(DATA_SOURCES)}, got {self.data_source!r}"
            )
        if self.http_timeout <= 0:
            raise ValueError("GALLERY_HTTP_TIMEOUT must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Create settings from environment variables."""
        env = os.environ if environ is None else environ

        timeout = env.get("GALLERY_HTTP_TIMEOUT", "10")
        try:
            http_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"GALLERY_HTTP_TIMEOUT is not a number: {timeout!r}") from None

        return cls(
            base_path=env.get("PUBLIC_BASE_URL", ""),
            data_source=env.get("GALLERY_DATA_SOURCE", "file").strip().lower(),
            data_root=env.get("GALLERY_DATA_ROOT", ".."),
            data_url=env.get("GALLERY_DATA_URL") or None,
            bundle_package=env.get("GALLERY_BUNDLE_PACKAGE", "model_gallery"),
            bundle_dir=env.get("GALLERY_BUNDLE_DIR", "static"),
            models_file=env.get("GALLERY_MODELS_FILE", "models.json"),
            metadata_file=env.get("GALLERY_METADATA_FILE", "metadata.json"),
            cache=env.get("GALLERY_CACHE", "").strip().lower() in _TRUE,
            http_timeout=http_timeout,
        )
