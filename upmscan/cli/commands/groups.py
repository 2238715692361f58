"""Groups command: dependencies grouped by origin with per-group counts."""
import sys
from typing import Optional

import typer

from upmscan.core.reporter import PackageReportService


def groups_command(
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    project_root: Optional[str] = typer.Option(None, "-p", "--project", help="Unity project directory"),
    manifest_path: Optional[str] = typer.Option(None, "-m", "--manifest", help="Manifest file override, relative to the project"),
):
    """Print dependencies grouped by package type."""

    service = PackageReportService()
    exit_code = service.execute_groups(
        config_path=config_path,
        project_root=project_root,
        manifest_path=manifest_path,
    )

    if exit_code != 0:
        sys.exit(exit_code)
