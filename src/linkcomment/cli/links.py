"""lnc links command - list every link in a file."""

import json
from pathlib import Path

import click

from linkcomment.navigation.document_links import document_links
from linkcomment.navigation.host import LocalFileHost


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def links_command(file: Path, as_json: bool) -> None:
    """List the [description](path@symbol) links in FILE."""
    document = LocalFileHost(echo=False).open(file)
    found = document_links(document.text)

    if as_json:
        click.echo(json.dumps([link.to_dict() for link in found]))
        return

    if not found:
        click.echo(f"No links in {file}")
        return

    for link in found:
        start = link.span.start
        target = f"{link.file_path or ''}@{link.symbol_name}"
        click.echo(f"{file}:{start.line + 1}:{start.column + 1}  {link.description}  -> {target}")
