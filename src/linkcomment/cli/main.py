"""linkcomment CLI - lnc command."""

from pathlib import Path

import click

from linkcomment import __version__
from linkcomment.cli.jump import follow_command, jump_command
from linkcomment.cli.links import links_command
from linkcomment.cli.locate import locate_command
from linkcomment.cli.render import render_command
from linkcomment.config.loader import load_config
from linkcomment.core.errors import ConfigError
from linkcomment.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="lnc")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding .linkcomment/config.yaml (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_root: Path | None) -> None:
    """linkcomment - follow [description](path@symbol) links in comments."""
    try:
        config = load_config(config_root)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(links_command, name="links")
cli.add_command(locate_command, name="locate")
cli.add_command(jump_command, name="jump")
cli.add_command(follow_command, name="follow")
cli.add_command(render_command, name="render")


if __name__ == "__main__":
    cli()
