# getdown_tool/cli/main.py
"""Main CLI entry point for getdown-tool"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT
from ..models import BuildConfig
from ..services import ConfigService
from .utils.output import console

# Import all commands
from .commands import (
    build,
    stage,
    descriptor,
    relpath,
    paths
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context

        Args:
            config_path: Explicit configuration file, if given
        """
        self.config_service = ConfigService(config_path)
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def config(self) -> BuildConfig:
        """Build configuration (loaded on first access)

        The -v flag also turns on the build's verbose logging.
        """
        config = self.config_service.config
        if self.verbose:
            config.verbose = True
        return config


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(path_type=Path, dir_okay=False),
    help='Project configuration file (default: nearest .getdown-tool.yaml)'
)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Getdown Tool - Stage launcher resources and write the descriptor

    Copies the configured UI resources (background images, icons, progress
    image, dock icon) into the working directory and writes the matching
    resource and UI lines of the launcher descriptor.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(build.build)
cli.add_command(stage.stage)
cli.add_command(descriptor.descriptor)
cli.add_command(relpath.relpath)
cli.add_command(paths.paths)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
