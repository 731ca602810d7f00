"""Shared fixtures for catalog tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from model_gallery.catalog_loader import CatalogLoader
from model_gallery.sources import FileSource

GRASS_CATALOG = {
    "models": [
        {
            "name": "grass",
            "materials": ["stone"],
            "texture_path": "t/grass.png",
            "added_date": "2024-01-01",
        }
    ]
}

METADATA = {
    "version": "20250101-120000",
    "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    "size": 2048,
    "commit": "0123456789abcdef0123456789abcdef01234567",
    "updated_at": "2025-01-01T12:00:00Z",
    "download_url": "OfroPack.zip",
    "latest_pr": {
        "number": 7,
        "title": "Add grass",
        "url": "https://github.com/TeamOfro/OfroPack/pull/7",
    },
}


def write_json(directory: Path, name: str, data: Any) -> Path:
    path = directory / name
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_json(tmp_path, "models.json", GRASS_CATALOG)
    write_json(tmp_path, "metadata.json", METADATA)
    return tmp_path


@pytest.fixture
def loader(data_dir: Path) -> CatalogLoader:
    return CatalogLoader(FileSource(str(data_dir)))
