import os
import sys

from rich.console import Console

def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        os.getenv('UNITY_CI') is not None or
        not sys.stdout.isatty()
    )

def get_console() -> Console:
    """Create a console suited to the current terminal."""
    if is_ci_environment():
        # Build scripts and pipes - plain text, no colors
        return Console(force_terminal=False, no_color=True, highlight=False)
    return Console()
