"""lnc render command - show a file the way the editor decorates it."""

from pathlib import Path

import click
from rich.console import Console
from rich.style import Style
from rich.text import Text

from linkcomment.config.constants import DECORATION_REPLACE
from linkcomment.config.models import LinkCommentConfig
from linkcomment.links.models import LineIndex
from linkcomment.navigation.decorations import CollapsedLink, DecorationPolicy
from linkcomment.navigation.host import LocalFileHost


def render_collapsed(text: str, collapsed: list[CollapsedLink], style: Style) -> Text:
    """Replace each collapsed link's markup with its styled description."""
    index = LineIndex(text)
    rendered = Text()
    cursor = 0
    for link in collapsed:
        start = index.line_start(link.span.start.line) + link.span.start.column
        end = index.line_start(link.span.end.line) + link.span.end.column
        rendered.append(text[cursor:start])
        rendered.append(link.display_text, style=style)
        cursor = end
    rendered.append(text[cursor:])
    return rendered


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--cursor-line",
    type=click.IntRange(min=1),
    default=None,
    help="1-based line the cursor is on; its links stay literal",
)
@click.pass_context
def render_command(ctx: click.Context, file: Path, cursor_line: int | None) -> None:
    """Print FILE with links collapsed to their descriptions."""
    config: LinkCommentConfig = (ctx.obj or {}).get("config") or LinkCommentConfig()
    host = LocalFileHost(echo=False)
    document = host.open(file)

    with DecorationPolicy(host, config.decorations) as policy:
        policy.refresh(document.text, cursor_line - 1 if cursor_line else -1)
        replace = next(d for d in host.decorations if d.kind == DECORATION_REPLACE)
        collapsed: list[CollapsedLink] = list(replace.ranges)

    style = Style(color=config.decorations.link_color, underline=config.decorations.underline)
    Console(soft_wrap=True, highlight=False).print(
        render_collapsed(document.text, collapsed, style), end=""
    )
