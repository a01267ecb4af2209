"""Descriptor command implementation"""

from pathlib import Path

import click

from ..utils.output import print_error, print_success
from ...api.builder import DescriptorBuilder
from ...api.exceptions import GetdownToolError
from ...constants import DESCRIPTOR_ENCODING, MSG_BUILD_SUCCESS
from ...utils.file_utils import atomic_write


@click.command()
@click.option(
    '--output', '-o',
    type=click.Path(path_type=Path, dir_okay=False),
    help='Write to this file instead of standard output'
)
@click.pass_context
def descriptor(ctx, output):
    """Print the resource and UI lines of the descriptor

    Nothing is staged; use 'build' to stage resources as well.

    Examples:
        getdown-tool descriptor
        getdown-tool descriptor -o getdown-ui.txt
    """
    try:
        text = DescriptorBuilder(ctx.obj.config).render_descriptor()
    except GetdownToolError as e:
        print_error("Cannot render descriptor", e)
        ctx.exit(1)

    if output is None:
        click.echo(text, nl=False)
        return

    try:
        atomic_write(output, text, encoding=DESCRIPTOR_ENCODING)
    except OSError as e:
        print_error(f"Failed writing {output}", e)
        ctx.exit(1)

    print_success(MSG_BUILD_SUCCESS.format(path=output))
