"""Errors raised while loading and querying the model catalog."""
from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class DataUnavailable(CatalogError):
    """A catalog document could not be read, parsed or validated."""

    def __init__(self, source: str, cause: Optional[BaseException] = None, message: Optional[str] = None):
        self.source = source
        self.cause = cause
        if message is None:
            message = f"Data unavailable from {source}"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message)


class DuplicateModelName(DataUnavailable):
    """The catalog lists the same model name more than once."""

    def __init__(self, source: str, name: str):
        self.name = name
        super().__init__(source, message=f"Duplicate model name '{name}' in {source}")


class ModelNotFound(CatalogError, LookupError):
    """No catalog entry matches the requested model name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Model {name} not found")
