"""Tests for project definition loading."""

import json
from pathlib import Path

import pytest

from logistics_order_properties.application.project_config import (
    DEFAULT_PROJECT_FILE,
    PROJECT_PATH_ENV_VAR,
    ProjectConfig,
    default_project_path,
    load_project_config,
)
from logistics_order_properties.domain.exceptions import ConfigurationError
from logistics_order_properties.domain.value_objects import OrderCustomPropertyType

PROJECT = {
    "capacities": [{"name": "Weight", "display_units": "lb"}],
    "custom_properties": [
        {"name": "Gate code", "type": "text", "length": 20},
        {"name": "Pallets", "type": "numeric", "length": 8},
    ],
    "address_fields": [{"type": "City", "title": "City"}],
}


def write_project(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadProjectConfig:
    """Test cases for load_project_config."""

    def test_load_valid_project(self, tmp_path):
        """Test loading a well-formed project file."""
        path = write_project(tmp_path / "project.json", PROJECT)

        config = load_project_config(path)

        assert [c.name for c in config.capacities] == ["Weight"]
        assert config.capacities[0].display_units == "lb"
        assert config.custom_properties[1].type is OrderCustomPropertyType.NUMERIC
        assert config.address_fields[0].title == "City"

    def test_load_accepts_string_path(self, tmp_path):
        """Test that a string path is accepted."""
        path = write_project(tmp_path / "project.json", {})

        config = load_project_config(str(path))

        assert config == ProjectConfig()

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Failed to read") as exc_info:
            load_project_config(tmp_path / "missing.json")

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_encoding(self, tmp_path):
        """Test that a file that is not UTF-8 raises ConfigurationError."""
        path = tmp_path / "project.json"
        path.write_bytes(b'{"capacities": [{"name": "\xff\xfe"}]}')

        with pytest.raises(ConfigurationError, match="not valid JSON") as exc_info:
            load_project_config(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises ConfigurationError."""
        path = tmp_path / "project.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_project_config(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"capacities": [{"name": " "}]},
            {"custom_properties": [{"name": "Gate code", "length": 0}]},
            {"address_fields": [{"type": "City"}]},
            {"unknown": []},
            [],
        ],
    )
    def test_invalid_schema(self, tmp_path, data):
        """Test that schema violations raise ConfigurationError."""
        path = write_project(tmp_path / "project.json", data)

        with pytest.raises(ConfigurationError, match="is invalid"):
            load_project_config(path)

    def test_default_path_from_environment(self, tmp_path, monkeypatch):
        """Test that the environment variable selects the default file."""
        path = write_project(tmp_path / "env_project.json", PROJECT)
        monkeypatch.setenv(PROJECT_PATH_ENV_VAR, str(path))

        assert default_project_path() == path
        assert len(load_project_config().custom_properties) == 2

    def test_default_path_fallback(self, monkeypatch):
        """Test the fallback file name when the environment is unset."""
        monkeypatch.delenv(PROJECT_PATH_ENV_VAR, raising=False)

        assert default_project_path() == Path(DEFAULT_PROJECT_FILE)


class TestProjectConfig:
    """Test cases for ProjectConfig."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config = ProjectConfig.model_validate(PROJECT)

    def test_custom_properties_info_is_read_only(self):
        """Test that the custom properties collection is frozen."""
        info = self.config.custom_properties_info()

        assert info.is_read_only is True
        assert [p.name for p in info] == ["Gate code", "Pallets"]
        assert info.total_length == 28

    def test_export_order_properties(self):
        """Test the exported catalog of a project."""
        result = self.config.export_order_properties()

        assert [(i.name, i.title) for i in result] == [
            ("City", "City"),
            ("Capacity0", "Weight"),
            ("OrderCustomProperty0", "Gate code"),
            ("OrderCustomProperty1", "Pallets"),
        ]

    def test_export_order_properties_with_exclude(self):
        """Test excluding properties by name."""
        result = self.config.export_order_properties(
            exclude=lambda name: name == "OrderCustomProperty0"
        )

        assert "OrderCustomProperty0" not in [i.name for i in result]
        assert len(result) == 3

    def test_config_is_immutable(self):
        """Test that source collections cannot be modified and the config hashes."""
        with pytest.raises(AttributeError):
            self.config.capacities.append(self.config.capacities[0])

        assert isinstance(self.config.custom_properties, tuple)
        assert hash(self.config) == hash(ProjectConfig.model_validate(PROJECT))
