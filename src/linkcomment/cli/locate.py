"""lnc locate command - run the symbol locator on one file."""

import json
from pathlib import Path

import click

from linkcomment.core.languages import LanguageTag, detect_language
from linkcomment.locator.ops import locate_symbol
from linkcomment.navigation.host import LocalFileHost


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("symbol")
@click.option(
    "--language",
    type=click.Choice([tag.value for tag in LanguageTag]),
    default=None,
    help="Override the language detected from the file extension",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def locate_command(file: Path, symbol: str, language: str | None, as_json: bool) -> None:
    """Find the definition of SYMBOL in FILE.

    Exits with status 1 when no definition is found.
    """
    document = LocalFileHost(echo=False).open(file)
    tag = LanguageTag(language) if language else detect_language(file)
    match = locate_symbol(document.text, symbol, tag)

    if as_json:
        payload = {"path": str(file), "symbol": symbol, "language": tag.value}
        payload["match"] = match.to_dict() if match else None
        click.echo(json.dumps(payload))
    elif match:
        click.echo(f"{file}:{match.line + 1}:{match.column + 1}")
    else:
        click.echo(f'Symbol "{symbol}" not found in {file}', err=True)

    if match is None:
        raise SystemExit(1)
