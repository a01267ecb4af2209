"""Stage command implementation"""

import click

from ..utils.output import format_staged_files, print_error
from ...api.exceptions import GetdownToolError
from ...core.resource_stager import ResourceStager


@click.command()
@click.pass_context
def stage(ctx):
    """Copy the configured UI resources into the staging directory

    Examples:
        getdown-tool stage
    """
    try:
        config = ctx.obj.config
        stager = ResourceStager(config.work_directory, config.staging)
        staged = stager.stage_all(config.ui)
    except GetdownToolError as e:
        print_error("Staging failed", e)
        ctx.exit(1)

    format_staged_files(staged, stager.staging_directory)
