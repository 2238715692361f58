"""
Package report service for UPMScan.

Loads configuration, runs catalog queries and renders the results. The CLI
commands are thin wrappers around this service.
"""
import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from upmscan.catalog import (
    get_all_packages,
    get_package_version_from_cache,
    print_packages,
    resolve_version,
)
from upmscan.models import PackageInfo, PackageType
from upmscan.rich_utils.ui_helpers import get_console

from upmscan.core.config_manager import ConfigManager

TYPE_STYLES = {
    PackageType.UNITY: "bold blue",
    PackageType.GIT: "bold magenta",
    PackageType.OPENUPM: "bold green",
    PackageType.STANDARD: "white",
}


def parse_package_type(value: str) -> Optional[PackageType]:
    """Match a category name case-insensitively, e.g. ``openupm`` -> ``OpenUpm``."""
    for package_type in PackageType:
        if package_type.value.lower() == value.lower():
            return package_type
    return None


def project_path(config: dict, key: str) -> Optional[str]:
    """Return ``config[key]`` with relative paths resolved against ``project_root``."""
    value = config.get(key)
    if not value:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = Path(config["project_root"]) / path
    return str(path)


class PackageReportService:
    """Builds and renders package reports."""

    def __init__(self, console: Optional[Console] = None):
        self.config_manager = ConfigManager()
        self.console = console or get_console()

    def load_config(
        self,
        config_path: Optional[str],
        project_root: Optional[str] = None,
        manifest_path: Optional[str] = None,
        version_source: Optional[str] = None,
        output_format: Optional[str] = None,
        cache_dir: Optional[str] = None,
    ) -> Tuple[dict, List[str]]:
        """Load, merge and validate configuration. Returns ``(config, errors)``."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(
            config,
            project_root=project_root,
            manifest_path=manifest_path,
            version_source=version_source,
            output_format=output_format,
            cache_dir=cache_dir,
        )
        return config, self.config_manager.validate(config)

    def collect_packages(self, config: dict, package_type: Optional[PackageType] = None) -> List[PackageInfo]:
        packages = get_all_packages(project_path(config, "manifest_path"), config["project_root"])
        if package_type is not None:
            packages = [p for p in packages if p.type == package_type]
        return packages

    def resolve_versions(self, config: dict, packages: List[PackageInfo]) -> Dict[str, str]:
        return {
            package.name: resolve_version(
                package,
                source=config["version_source"],
                project_root=config["project_root"],
                cache_dir=project_path(config, "cache_dir"),
            )
            for package in packages
        }

    def render(self, config: dict, packages: List[PackageInfo]) -> None:
        output_format = config["output"]["format"]
        versions = self.resolve_versions(config, packages)

        if output_format == "json":
            records = []
            for package in packages:
                record = package.to_dict()
                record["version"] = versions[package.name]
                records.append(record)
            print(json.dumps(records, indent=2))
        elif output_format == "text":
            for package in packages:
                self.console.print(package.describe(versions[package.name]), markup=False, soft_wrap=True)
        else:
            self._display_table(packages, versions)

    def _display_table(self, packages: List[PackageInfo], versions: Dict[str, str]) -> None:
        """Display packages using a Rich table."""
        if not packages:
            self.console.print("No packages found.", style="yellow")
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Package", style="white", no_wrap=True)
        table.add_column("Type", justify="center")
        table.add_column("Version", justify="right", style="white")
        table.add_column("Declared", style="dim", overflow="fold")

        for package in packages:
            # Manifest values are user text, never markup
            table.add_row(
                escape(package.name),
                f"[{TYPE_STYLES[package.type]}]{package.type.value}[/]",
                escape(versions[package.name] or "-"),
                escape(package.url),
            )

        self.console.print(table)
        self.console.print(f"{len(packages)} packages", style="bold")

    def execute_list(
        self,
        config_path: Optional[str] = None,
        project_root: Optional[str] = None,
        manifest_path: Optional[str] = None,
        package_type: Optional[str] = None,
        version_source: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> int:
        """Run the ``list`` report. Returns the process exit code."""
        config = self._prepare(config_path, project_root, manifest_path, version_source, output_format)
        if config is None:
            return 2

        selected_type = None
        if package_type:
            selected_type = parse_package_type(package_type)
            if selected_type is None:
                choices = ", ".join(t.value for t in PackageType)
                self.console.print(f"Unknown package type '{package_type}'. Choose from: {choices}", style="red")
                return 2

        self.render(config, self.collect_packages(config, selected_type))
        return 0

    def execute_groups(
        self,
        config_path: Optional[str] = None,
        project_root: Optional[str] = None,
        manifest_path: Optional[str] = None,
    ) -> int:
        config = self._prepare(config_path, project_root, manifest_path)
        if config is None:
            return 2
        print_packages(project_path(config, "manifest_path"), config["project_root"], console=self.console)
        return 0

    def execute_version(
        self,
        package_name: str,
        config_path: Optional[str] = None,
        project_root: Optional[str] = None,
        cache_dir: Optional[str] = None,
    ) -> int:
        config = self._prepare(config_path, project_root, cache_dir=cache_dir)
        if config is None:
            return 2
        version = get_package_version_from_cache(
            package_name, config["project_root"], project_path(config, "cache_dir")
        )
        if not version:
            self.console.print(f"{package_name}: not found in package cache", style="red", markup=False)
            return 1
        self.console.print(f"{package_name}@{version}", markup=False, soft_wrap=True)
        return 0

    def _prepare(self, config_path: Optional[str], project_root: Optional[str] = None,
                 manifest_path: Optional[str] = None, version_source: Optional[str] = None,
                 output_format: Optional[str] = None, cache_dir: Optional[str] = None) -> Optional[dict]:
        try:
            config, errors = self.load_config(
                config_path, project_root, manifest_path, version_source, output_format, cache_dir
            )
        except (OSError, ValueError, yaml.YAMLError) as e:
            self.console.print(str(e), style="red", markup=False)
            return None

        if errors:
            for error in errors:
                self.console.print(f"Configuration error: {error}", style="red", markup=False)
            return None
        return config
