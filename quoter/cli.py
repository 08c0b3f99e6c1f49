from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from .config import MIN_WRAP_WIDTH, QuoteConfig
from .errors import QuoterError
from .presenter import render
from .sources import SOURCES, fetch_quote


app = typer.Typer(help="A random quote fetching console utility", add_completion=False)


def _load_config(**overrides) -> QuoteConfig:
	try:
		return QuoteConfig.load(**overrides)
	except ValidationError as exc:
		msgs = "; ".join(err["msg"] for err in exc.errors())
		raise typer.BadParameter(msgs)


def _flag(value: bool) -> Optional[bool]:
	# An unset switch keeps whatever the environment says
	return True if value else None


@app.command()
def main(
	language: Optional[str] = typer.Option(
		None, "--language", "-l", help="Quote language, must be one of: en[glish], ru[ssian]"
	),
	ascii_quotation: bool = typer.Option(False, "--ascii-quotation", "-a", help="Force ASCII quotation marks"),
	no_colors: bool = typer.Option(False, "--no-colors", "-n", help="Disable colors"),
	json_output: bool = typer.Option(False, "--json", "-j", help="Return quote in JSON"),
	wrap_width: Optional[int] = typer.Option(
		None, "--wrap-width", "-w", min=MIN_WRAP_WIDTH, help="Wrap width in characters, default is terminal width"
	),
	provider: Optional[str] = typer.Option(
		None, "--provider", "-p", help=f"Quote provider: {', '.join(SOURCES)}"
	),
	list_providers: bool = typer.Option(False, "--list-providers", help="Print known providers and exit"),
):
	"""Fetch a random quote and print it."""
	if list_providers:
		for name in SOURCES:
			typer.echo(name)
		return

	config = _load_config(
		language=language,
		ascii_quotation=_flag(ascii_quotation),
		no_colors=_flag(no_colors),
		json_output=_flag(json_output),
		wrap_width=wrap_width,
		provider=provider,
	)
	try:
		quote = fetch_quote(config.provider, config.language, config)
		lines = render(quote, config)
	except QuoterError as exc:
		typer.echo(f"error: {exc}", err=True)
		raise typer.Exit(code=1)

	for line in lines:
		typer.echo(line)


def run():
	app()


if __name__ == "__main__":
	run()
