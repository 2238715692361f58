"""Version command: installed version of one package from the package cache."""
import sys
from typing import Optional

import typer

from upmscan.core.reporter import PackageReportService


def version_command(
    package_name: str = typer.Argument(..., help="Package name, e.g. com.unity.textmeshpro"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    project_root: Optional[str] = typer.Option(None, "-p", "--project", help="Unity project directory"),
    cache_dir: Optional[str] = typer.Option(None, "--cache-dir", help="Package cache directory override, relative to the project"),
):
    """Show the cached version of a package."""

    service = PackageReportService()
    exit_code = service.execute_version(
        package_name,
        config_path=config_path,
        project_root=project_root,
        cache_dir=cache_dir,
    )

    if exit_code != 0:
        sys.exit(exit_code)
