"""Tests for catalog queries."""

from __future__ import annotations

import pytest

from model_gallery.catalog import ModelCatalog
from model_gallery.errors import CatalogError, DataUnavailable, ModelNotFound
from model_gallery.schemas import ModelsCatalog


def _catalog(*names: str) -> ModelCatalog:
    models = [
        {"name": name, "materials": ["stick"], "texture_path": f"t/{name}.png", "added_date": "2024-01-01"}
        for name in names
    ]
    return ModelCatalog(ModelsCatalog.model_validate({"models": models}))


class TestModelCatalog:
    def test_list_models_keeps_order(self) -> None:
        catalog = _catalog("zeta", "alpha", "mid")
        assert [m.name for m in catalog.list_models()] == ["zeta", "alpha", "mid"]

    def test_list_models_returns_copy(self) -> None:
        catalog = _catalog("a", "b")
        models = catalog.list_models()
        models.clear()
        assert len(catalog.list_models()) == 2

    def test_get_model(self) -> None:
        catalog = _catalog("a", "b", "c")
        assert catalog.get_model("b").texture_path_or_url == "t/b.png"

    def test_get_model_is_case_sensitive(self) -> None:
        catalog = _catalog("grass")
        with pytest.raises(ModelNotFound) as exc_info:
            catalog.get_model("Grass")
        assert exc_info.value.name == "Grass"

    def test_not_found_is_not_data_unavailable(self) -> None:
        with pytest.raises(ModelNotFound) as exc_info:
            _catalog().get_model("grass")
        assert isinstance(exc_info.value, CatalogError)
        assert isinstance(exc_info.value, LookupError)
        assert not isinstance(exc_info.value, DataUnavailable)

    def test_model_names_match_list(self) -> None:
        catalog = _catalog("c", "a", "b")
        assert catalog.model_names() == [m.name for m in catalog.list_models()]

    def test_every_name_can_be_looked_up(self) -> None:
        catalog = _catalog("c", "a", "b")
        for name in catalog.model_names():
            assert catalog.get_model(name).name == name

    def test_empty(self) -> None:
        catalog = _catalog()
        assert catalog.list_models() == []
        assert catalog.model_names() == []
        assert len(catalog) == 0

    def test_container_protocol(self) -> None:
        catalog = _catalog("a", "b")
        assert len(catalog) == 2
        assert "a" in catalog
        assert "z" not in catalog
        assert [m.name for m in catalog] == ["a", "b"]
