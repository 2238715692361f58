"""
Configuration management for UPMScan.

Handles loading, merging, discovery and validation of configuration files.
"""
import importlib.resources as importlib_resources
import os
from typing import List, Optional

import yaml

from upmscan.catalog import VERSION_SOURCES

CONFIG_FILENAME = "upmscan.config.yaml"
OUTPUT_FORMATS = ("table", "text", "json")


class ConfigManager:
    """Manages UPMScan configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return config

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config shipped with the package."""
        import upmscan.config
        default_config_path = importlib_resources.files(upmscan.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: upmscan.config.yaml in current directory
        if os.path.exists(CONFIG_FILENAME):
            return self.load_and_merge_config(CONFIG_FILENAME)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(
        self,
        config: dict,
        project_root: Optional[str] = None,
        manifest_path: Optional[str] = None,
        version_source: Optional[str] = None,
        output_format: Optional[str] = None,
        cache_dir: Optional[str] = None,
    ) -> dict:
        """Merge configuration with CLI arguments. ``None`` leaves a value untouched."""
        if project_root is not None:
            config["project_root"] = project_root
        if manifest_path is not None:
            config["manifest_path"] = manifest_path
        if version_source is not None:
            config["version_source"] = version_source
        if cache_dir is not None:
            config["cache_dir"] = cache_dir
        if output_format is not None:
            output = config.setdefault("output", {})
            # A malformed output section is left for validate() to report
            if isinstance(output, dict):
                output["format"] = output_format

        return config

    def validate(self, config: dict) -> List[str]:
        """Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        source = config.get("version_source")
        if source not in VERSION_SOURCES:
            errors.append(
                f"'version_source' must be one of {', '.join(VERSION_SOURCES)}, got {source!r}"
            )

        output = config.get("output")
        if not isinstance(output, dict):
            errors.append("'output' section must be a mapping")
        elif output.get("format") not in OUTPUT_FORMATS:
            errors.append(
                f"'output.format' must be one of {', '.join(OUTPUT_FORMATS)}, got {output.get('format')!r}"
            )

        if not isinstance(config.get("project_root"), str):
            errors.append("'project_root' must be a string")

        for key in ("manifest_path", "cache_dir"):
            if config.get(key) is not None and not isinstance(config[key], str):
                errors.append(f"'{key}' must be a path string or null")

        return errors
