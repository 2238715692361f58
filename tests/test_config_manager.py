"""Test configuration loading, merging and validation."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import yaml

from upmscan.core.config_manager import CONFIG_FILENAME, ConfigManager


class TestConfigManager:
    """Test the ConfigManager class."""

    def test_package_default_config(self):
        """The shipped default config is valid."""
        manager = ConfigManager()

        config = manager.load_package_default_config()

        assert config["project_root"] == "."
        assert config["manifest_path"] is None
        assert config["version_source"] == "declared"
        assert config["output"]["format"] == "table"
        assert manager.validate(config) == []

    def test_deep_merge(self):
        manager = ConfigManager()
        default = {"a": 1, "output": {"format": "table", "extra": True}}
        user = {"output": {"format": "json"}, "b": 2}

        assert manager.deep_merge(default, user) == {
            "a": 1,
            "b": 2,
            "output": {"format": "json", "extra": True},
        }

    def test_explicit_config_is_merged_with_default(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({"version_source": "cache", "output": {"format": "text"}}))

        config = ConfigManager().discover_and_load_config(str(path))

        assert config["version_source"] == "cache"
        assert config["output"]["format"] == "text"
        assert config["project_root"] == "."

    def test_missing_explicit_config_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            ConfigManager().discover_and_load_config(str(tmp_path / "missing.yaml"))

    def test_discovers_config_in_working_directory(self, tmp_path, monkeypatch):
        """upmscan.config.yaml in the current directory is picked up."""
        (tmp_path / CONFIG_FILENAME).write_text(yaml.safe_dump({"project_root": "UnityProject"}))
        monkeypatch.chdir(tmp_path)

        config = ConfigManager().discover_and_load_config(None)

        assert config["project_root"] == "UnityProject"
        assert config["version_source"] == "declared"

    def test_empty_user_config(self, tmp_path):
        """An empty YAML file behaves like the default config."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        manager = ConfigManager()

        assert manager.discover_and_load_config(str(path)) == manager.load_package_default_config()

    def test_merge_config_and_args(self):
        manager = ConfigManager()
        config = manager.load_package_default_config()

        merged = manager.merge_config_and_args(
            config, project_root="/game", version_source="cache", output_format="json"
        )

        assert merged["project_root"] == "/game"
        assert merged["manifest_path"] is None
        assert merged["version_source"] == "cache"
        assert merged["output"]["format"] == "json"

    def test_load_config_rejects_non_mapping(self, tmp_path):
        """A YAML list or scalar at the top level is not a config."""
        path = tmp_path / "list.yaml"
        path.write_text("- project_root\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            ConfigManager().load_config(str(path))

    def test_merge_format_into_scalar_output_section(self):
        """A malformed output section is kept as-is and reported by validate."""
        manager = ConfigManager()
        config = manager.deep_merge(manager.load_package_default_config(), {"output": "json"})

        merged = manager.merge_config_and_args(config, output_format="text", cache_dir="Cache")

        assert merged["output"] == "json"
        assert merged["cache_dir"] == "Cache"
        assert manager.validate(merged) == ["'output' section must be a mapping"]

    def test_validate_path_types(self):
        manager = ConfigManager()
        config = manager.load_package_default_config()
        config["manifest_path"] = 5
        config["cache_dir"] = ["Library"]

        errors = manager.validate(config)

        assert errors == [
            "'manifest_path' must be a path string or null",
            "'cache_dir' must be a path string or null",
        ]

    def test_validate_reports_bad_values(self):
        manager = ConfigManager()
        config = {"project_root": 3, "version_source": "registry", "output": {"format": "xml"}}

        errors = manager.validate(config)

        assert len(errors) == 3
        assert any("version_source" in error for error in errors)
        assert any("output.format" in error for error in errors)
        assert any("project_root" in error for error in errors)
