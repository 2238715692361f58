"""
List command implementation.

Thin wrapper around PackageReportService that handles CLI argument parsing
and delegates to the service layer.
"""
import sys
from typing import Optional

import typer

from upmscan.core.reporter import PackageReportService


def list_command(
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    project_root: Optional[str] = typer.Option(None, "-p", "--project", help="Unity project directory"),
    manifest_path: Optional[str] = typer.Option(None, "-m", "--manifest", help="Manifest file override, relative to the project"),
    package_type: Optional[str] = typer.Option(None, "-t", "--type", help="Only list Unity, Git, OpenUpm or Standard packages"),
    version_source: Optional[str] = typer.Option(None, "-s", "--source", help="Version source: declared or cache"),
    output_format: Optional[str] = typer.Option(None, "-f", "--format", help="Output format: table, text or json"),
):
    """List the dependencies declared in the project manifest."""

    service = PackageReportService()
    exit_code = service.execute_list(
        config_path=config_path,
        project_root=project_root,
        manifest_path=manifest_path,
        package_type=package_type,
        version_source=version_source,
        output_format=output_format,
    )

    if exit_code != 0:
        sys.exit(exit_code)
