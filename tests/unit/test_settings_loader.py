"""Tests for settings and catalogue loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tabletops.application.config import (
    CatalogueMaterialConfig,
    ConfigError,
    ConfiguratorSettings,
    config_to_catalogue,
    config_to_tabletop,
    load_catalogue,
    load_settings,
    load_settings_from_dict,
    settings_to_estimator,
)
from tabletops.domain.value_objects import TableShape
from tabletops.infrastructure import HttpPricingClient


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# =============================================================================
# Settings
# =============================================================================


class TestLoadSettings:
    def test_fixture_file(self, fixtures_path: Path) -> None:
        settings = load_settings(fixtures_path / "settings_local.json")

        assert settings.pricing.endpoint is None
        assert settings.pricing.timeout_seconds == 5
        assert settings.defaults.shape == TableShape.RECT
        assert settings.defaults.length_mm == 1600

    def test_defaults(self) -> None:
        settings = load_settings_from_dict({})
        assert settings.schema_version == "1.0"
        assert settings.pricing.function_name == "calculateTabletopPrice"
        assert settings.pricing.debounce_ms == 250
        assert settings.defaults.thickness_mm == 25

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"pricing": ', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "s.json", {"pricing": {"endpont": "https://x"}})

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "pricing.endpont"
        assert "pricing.endpont" in str(error)

    def test_unsupported_schema_version(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_settings_from_dict({"schema_version": "2.0"})

    def test_out_of_range_quantity(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings_from_dict({"defaults": {"quantity": 0}})
        assert exc_info.value.details[0]["path"] == "defaults.quantity"


# =============================================================================
# Catalogue
# =============================================================================


class TestLoadCatalogue:
    def test_fixture_file(self, fixtures_path: Path) -> None:
        records = load_catalogue(fixtures_path / "catalogue.json")

        assert [r.id for r in records] == ["oak-veneer", "forbo-lino", "white-laminate"]
        lino = records[1]
        assert lino.max_length == "3600"
        assert lino.available_thicknesses == ["25", "twenty", "33"]
        assert records[0].material_type == "Veneer"

    def test_snake_case_keys_accepted(self) -> None:
        record = CatalogueMaterialConfig.model_validate(
            {"id": "a", "name": "Ash", "material_type": "Timber", "max_width": "1.2"}
        )
        records = config_to_catalogue([record])
        assert records[0].material_type == "Timber"
        assert records[0].max_width == "1.2"

    def test_record_without_id_rejected(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "c.json", [{"name": "Nameless"}])
        with pytest.raises(ConfigError) as exc_info:
            load_catalogue(path)
        assert exc_info.value.details[0]["path"] == "[0].id"

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "c.json", {"id": "a"})
        with pytest.raises(ConfigError):
            load_catalogue(path)


# =============================================================================
# Adapters
# =============================================================================


class TestAdapters:
    def test_config_to_tabletop(self) -> None:
        settings = load_settings_from_dict({"defaults": {"shape": "round", "length_mm": 1200}})
        config = config_to_tabletop(settings.defaults)
        assert config.shape == TableShape.ROUND
        assert config.length_mm == 1200
        assert config.width_mm == 900

    def test_catalogue_sorted_by_name(self, fixtures_path: Path) -> None:
        materials = config_to_catalogue(load_catalogue(fixtures_path / "catalogue.json"))
        assert [m.name for m in materials] == [
            "Arctic White Laminate",
            "Forbo Linoleum",
            "Oak Veneer",
        ]
        assert materials[2].available_thicknesses == ("18mm", "25mm", "33mm")

    def test_local_estimator_without_endpoint(self) -> None:
        estimator = settings_to_estimator(ConfiguratorSettings())
        assert estimator.client is None
        assert estimator.debounce == 0.25

    def test_remote_estimator(self) -> None:
        settings = load_settings_from_dict(
            {"pricing": {"endpoint": "https://fn.example.com", "timeout_seconds": 3}}
        )
        estimator = settings_to_estimator(settings)
        assert isinstance(estimator.client, HttpPricingClient)
        assert estimator.client.url == "https://fn.example.com/calculateTabletopPrice"
        assert estimator.timeout == 3

    def test_remote_disabled(self) -> None:
        settings = load_settings_from_dict({"pricing": {"endpoint": "https://fn.example.com"}})
        assert settings_to_estimator(settings, remote=False).client is None
