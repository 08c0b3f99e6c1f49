from __future__ import annotations

import textwrap
from typing import List, Tuple

import typer

from .config import QuoteConfig
from .quote import Quote


STRAIGHT_QUOTES: Tuple[str, str] = ('"', '"')
CURLY_QUOTES: Tuple[str, str] = ("“", "”")
GUILLEMETS: Tuple[str, str] = ("«", "»")
GERMAN_QUOTES: Tuple[str, str] = ("„", "“")

QUOTATION_MARKS = {
	("en", True): STRAIGHT_QUOTES,
	("ru", True): STRAIGHT_QUOTES,
	("en", False): CURLY_QUOTES,
	("ru", False): GUILLEMETS,
}


def quotation_marks(language: str, ascii_quotation: bool) -> Tuple[str, str]:
	return QUOTATION_MARKS[(language, bool(ascii_quotation))]


def localize_quotations(text: str, language: str) -> str:
	"""Swap quotation marks inside the quote so they differ from the enclosing ones."""
	if language == "ru":
		return text.replace(GUILLEMETS[0], GERMAN_QUOTES[0]).replace(GUILLEMETS[1], GERMAN_QUOTES[1])
	return text.replace('"', "'")


def wrap_text(text: str, wrap_width: int) -> str:
	# Reserve two columns for the enclosing marks; a word longer than the
	# line is kept whole. Line breaks in the quote are kept.
	return "\n".join(
		textwrap.fill(
			line,
			width=max(1, wrap_width - 2),
			break_long_words=False,
			break_on_hyphens=False,
		)
		for line in text.split("\n")
	)


def render(quote: Quote, config: QuoteConfig) -> List[str]:
	"""Turn a fetched quote into output lines.

	JSON mode yields a single JSON line. Otherwise the first line is the
	wrapped, quote-marked text (it may contain newlines) and the author, if
	any, follows as a second line.
	"""
	quote = quote.trimmed()
	if config.json_output:
		return [quote.to_json()]

	left, right = quotation_marks(config.language, config.ascii_quotation)
	body = localize_quotations(wrap_text(quote.text, config.wrap_width), config.language)
	quote_line = f"{left}{body}{right}"
	if not config.no_colors:
		quote_line = typer.style(quote_line, fg=typer.colors.BRIGHT_BLUE, bold=True)
	lines = [quote_line]

	if quote.author:
		author_line = quote.author
		if not config.no_colors:
			author_line = typer.style(author_line, fg=typer.colors.BRIGHT_YELLOW)
		lines.append(author_line)
	return lines
