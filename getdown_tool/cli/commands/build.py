"""Build command implementation"""

import json

import click

from ..utils.output import console, format_build_result
from ...api.builder import DescriptorBuilder
from ...api.exceptions import GetdownToolError
from ...constants import EMOJI_PACKAGE
from ...core.signing import CommandSignTool
from ...models import BuildResult


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def build(ctx, as_json):
    """Stage UI resources and write the descriptor

    Examples:
        getdown-tool build
        getdown-tool -v --config ./app/.getdown-tool.yaml build
        getdown-tool build --json
    """
    try:
        config = ctx.obj.config
        sign_tool = None
        if config.sign is not None and config.sign.command:
            sign_tool = CommandSignTool(config.sign.command)

        if not as_json:
            console.print(f"{EMOJI_PACKAGE} Building descriptor in {config.work_directory}...")
        result = DescriptorBuilder(config, sign_tool).build()

    except GetdownToolError as e:
        result = BuildResult(success=False, error=f"{e.error_code}: {e}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        format_build_result(result)

    if not result.success:
        ctx.exit(1)
