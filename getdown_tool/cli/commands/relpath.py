"""Relative path command"""

import click

from ..utils.output import print_error
from ...api.exceptions import NoCommonDirectoryError
from ...core.path_resolver import relativize


@click.command()
@click.argument('base')
@click.argument('target')
@click.option(
    '--segment-aware', is_flag=True,
    help='Only treat BASE as containing TARGET on whole path segments'
)
@click.pass_context
def relpath(ctx, base, target, segment_aware):
    """Print TARGET relative to BASE

    Examples:
        getdown-tool relpath target/getdown/getdown.txt lib/app.jar
        getdown-tool relpath /data/foo /data/foobar --segment-aware
    """
    try:
        click.echo(relativize(base, target, segment_aware=segment_aware))
    except NoCommonDirectoryError as e:
        print_error("Cannot relativize", e)
        ctx.exit(1)
