"""
Main CLI application for UPMScan.

Defines the Typer application structure and command routing, keeping the
CLI layer thin.
"""
import logging

import typer

from upmscan.cli.commands.groups import groups_command
from upmscan.cli.commands.list import list_command
from upmscan.cli.commands.version import version_command


# Initialize Typer app
app = typer.Typer(help="UPMScan - Unity Package Manager manifest inspector")

# Register commands
app.command("list", help="List manifest dependencies with their origin and version.")(list_command)
app.command("groups", help="Print dependencies grouped by package type.")(groups_command)
app.command("version", help="Show the installed version of a package from the package cache.")(version_command)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


# Make list the default command when no subcommand is specified
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show informational log messages"),
):
    """UPMScan - Unity Package Manager manifest inspector.

    Run 'upmscan list' to classify the dependencies of a Unity project.
    Run 'upmscan version <package>' to look a package up in the package cache.
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(
            list_command,
            config_path=None,
            project_root=None,
            manifest_path=None,
            package_type=None,
            version_source=None,
            output_format=None,
        )
