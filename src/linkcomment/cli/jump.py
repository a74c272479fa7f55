"""lnc jump / lnc follow commands - follow a link to its definition."""

import asyncio
import json
from pathlib import Path

import click

from linkcomment.config.models import LinkCommentConfig
from linkcomment.links.parser import parse_target
from linkcomment.navigation.host import LocalFileHost
from linkcomment.navigation.jump import JumpOutcome, Navigator


def _navigator(ctx: click.Context, host: LocalFileHost) -> Navigator:
    config: LinkCommentConfig = (ctx.obj or {}).get("config") or LinkCommentConfig()
    return Navigator(host, enabled_languages=config.navigation.enabled_languages)


def _emit(outcome: JumpOutcome, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(outcome.to_dict()))
    elif outcome.location is not None:
        loc = outcome.location
        click.echo(f"{loc.path}:{loc.line + 1}:{loc.column + 1}")
    if not outcome.ok:
        raise SystemExit(1)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.argument("column", type=click.IntRange(min=1))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def jump_command(ctx: click.Context, file: Path, line: int, column: int, as_json: bool) -> None:
    """Go to the definition named by the link at LINE:COLUMN of FILE (1-based)."""
    host = LocalFileHost(echo=not as_json)
    source = host.open(file)
    outcome = asyncio.run(_navigator(ctx, host).definition_at(source, line - 1, column - 1))
    if outcome is None:
        raise click.ClickException(f"No link at {file}:{line}:{column}")
    _emit(outcome, as_json)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("target")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def follow_command(ctx: click.Context, file: Path, target: str, as_json: bool) -> None:
    """Follow TARGET ("path@symbol" or "@symbol") as if clicked inside FILE."""
    parsed = parse_target(target)
    if parsed is None:
        raise click.ClickException(f"Not a link target: {target!r} (expected path@symbol)")

    host = LocalFileHost(echo=not as_json)
    result = asyncio.run(
        _navigator(ctx, host).on_activate_link(file, parsed.file_path, parsed.symbol_name)
    )

    if as_json:
        click.echo(json.dumps(result))
    elif host.revealed is not None:
        path, span = host.revealed
        click.echo(f"{path}:{span.start.line + 1}:{span.start.column + 1}")
    if "targetPath" not in result:
        raise SystemExit(1)
