"""Typed records for models.json and metadata.json."""
import re
from datetime import datetime
from typing import Annotated, Optional, Tuple
from urllib.parse import urlsplit

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

SHA1_PATTERN = re.compile(r"^[0-9a-f]{40}$")

# Minecraft game ticks
TICKS_PER_SECOND = 20


def _check_iso8601(value: str) -> str:
    """Accept ``YYYY-MM-DD`` or a full ISO-8601 timestamp, return it unchanged."""
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"not an ISO-8601 date: {value!r}") from None
    return value


IsoDate = Annotated[str, AfterValidator(_check_iso8601)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class AnimationData(_Record):
    """Animation info of an animated texture."""

    frame_count: int = Field(ge=0, strict=True)
    frametime: int = Field(ge=0, strict=True)

    @property
    def duration_ticks(self) -> int:
        return self.frame_count * self.frametime

    @property
    def duration_seconds(self) -> float:
        return self.duration_ticks / TICKS_PER_SECOND


class ModelData(_Record):
    """One catalog entry; ``name`` is its routing key."""

    name: str = Field(min_length=1)
    materials: Tuple[str, ...]
    texture_path_or_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("texture_path", "texture_url", "texture_path_or_url"),
    )
    added_date: IsoDate
    author: Optional[str] = None
    animation: Optional[AnimationData] = None

    @model_validator(mode="after")
    def _animation_needs_texture(self) -> "ModelData":
        if self.animation is not None and self.texture_path_or_url is None:
            raise ValueError(f"model '{self.name}' has animation but no texture")
        return self

    @property
    def is_texture(self) -> bool:
        return self.texture_path_or_url is not None

    @property
    def is_animated(self) -> bool:
        return self.animation is not None


class ModelsCatalog(_Record):
    """Contents of models.json, in gallery display order."""

    models: Tuple[ModelData, ...]
    count: Optional[int] = Field(default=None, ge=0, strict=True)

    @model_validator(mode="after")
    def _count_matches(self) -> "ModelsCatalog":
        if self.count is not None and self.count != len(self.models):
            raise ValueError(f"count is {self.count} but {len(self.models)} models are listed")
        return self


class LatestPr(_Record):
    """Most recently merged pull request."""

    number: int = Field(gt=0, strict=True)
    title: Optional[str] = None
    url: str

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"not an absolute URL: {value!r}")
        return value


class BuildMetadata(_Record):
    """Contents of metadata.json describing the built resource pack."""

    version: Optional[str] = None
    sha1: Optional[str] = None
    size: int = Field(ge=0, strict=True)
    commit: Optional[str] = None
    updated_at: IsoDate
    download_url: Optional[str] = None
    latest_pr: Optional[LatestPr] = None

    @field_validator("sha1")
    @classmethod
    def _sha1_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not SHA1_PATTERN.match(value):
            raise ValueError("sha1 must be 40 lowercase hex characters")
        return value
