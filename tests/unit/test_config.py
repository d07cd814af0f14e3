"""Unit tests for configuration loading."""

from unittest.mock import patch

import pytest
import yaml

from wasteflow.config import (
    DEFAULT_COLORS,
    DEFAULT_TIMELINE_YEARS,
    Settings,
    default_config,
    default_config_path,
    load_settings,
)
from wasteflow.core.errors import ConfigError
from wasteflow.core.types import NodeOrder, ResidualPolicy


class TestLoadSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = load_settings(tmp_path / "missing.yaml")

        assert settings.selected_year == 2016
        assert settings.timeline_years == DEFAULT_TIMELINE_YEARS
        assert settings.residual_policy == ResidualPolicy.CLAMP
        assert settings.node_order == NodeOrder.INSERTION

    def test_overrides_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "selected_year": 2010,
            "node_order": "sorted",
            "residual_policy": "reject",
            "colors": {"recycled": "#00ff00"},
        }))

        settings = load_settings(path)

        assert settings.selected_year == 2010
        assert settings.node_order == NodeOrder.SORTED
        assert settings.residual_policy == ResidualPolicy.REJECT
        assert settings.colors["recycled"] == "#00ff00"
        # Partial palettes keep the other defaults
        assert settings.colors["incinerated"] == DEFAULT_COLORS["incinerated"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("selected_year: [2016")

        with pytest.raises(ConfigError, match="Failed to parse"):
            load_settings(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"residual_policy": "ignore"}))

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- 2016\n")

        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_settings(path)


class TestConfigPath:
    def test_env_var_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WASTEFLOW_CONFIG", str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"

    def test_project_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WASTEFLOW_CONFIG", raising=False)
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            assert default_config_path() == tmp_path / ".wasteflow" / "config.yaml"


class TestSettings:
    def test_canvas_grows_with_countries(self):
        settings = Settings(height=800)

        assert settings.canvas_height(10) == 800
        assert settings.canvas_height(100) == 3000

    def test_default_config_is_plain_data(self):
        config = default_config()

        assert config["node_order"] == "insertion"
        assert yaml.safe_load(yaml.dump(config)) == config
