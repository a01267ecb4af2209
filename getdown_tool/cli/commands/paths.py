"""Path display command"""

import click
from rich import box
from rich.table import Table

from ..utils.output import console, print_error
from ...api.exceptions import GetdownToolError
from ...core.path_resolver import PathResolver


@click.command()
@click.pass_context
def paths(ctx):
    """Show the directories and files a build uses

    Examples:
        getdown-tool paths
    """
    try:
        config = ctx.obj.config
    except GetdownToolError as e:
        print_error("Cannot load configuration", e)
        ctx.exit(1)

    resolver = PathResolver(
        config.project_root,
        config.work_directory,
        config.staging,
        config.descriptor,
    )

    table = Table(title="Build Paths", box=box.ROUNDED)
    table.add_column("Path Type", style="cyan")
    table.add_column("Absolute Path", style="green")
    table.add_column("Relative Path", style="yellow")

    paths_info = [
        ("Project Root", resolver.project_root),
        ("Work Directory", resolver.work_directory),
        ("Staging Directory", resolver.get_staging_dir()),
        ("Descriptor", resolver.get_descriptor_path()),
    ]

    for name, abs_path in paths_info:
        try:
            rel_path = resolver.make_relative(abs_path)
        except GetdownToolError:
            rel_path = "-"
        table.add_row(name, str(abs_path), rel_path)

    console.print(table)
