from __future__ import annotations

import json
import sys
from typing import Dict, Optional, Type

import requests
from pydantic import BaseModel, Field, ValidationError

from .config import QuoteConfig, normalize_language
from .errors import DecodeError, ParseError, RequestError
from .quote import Quote
from .repair import repair_escapes


class QuoteSource:
	"""One remote quote provider.

	Subclasses set ``name``, ``base_url`` and ``needs_repair`` and implement
	``build_request`` and ``decode``; ``fetch`` runs the shared pipeline.
	"""

	name = ""
	base_url = ""
	needs_repair = False

	def __init__(self, base_url: Optional[str] = None, timeout_seconds: Optional[float] = None, debug: bool = False):
		self.base_url = (base_url or self.base_url).rstrip("/")
		self.timeout_seconds = timeout_seconds
		self.debug = debug

	def build_request(self, language: str) -> tuple[str, Optional[Dict[str, str]]]:
		raise NotImplementedError

	def decode(self, payload: object) -> Quote:
		raise NotImplementedError

	def request_text(self, language: str) -> str:
		url, params = self.build_request(language)
		if self.debug:
			print(f"[request] GET {url} params={params}", file=sys.stderr)
		try:
			resp = requests.get(url, params=params, timeout=self.timeout_seconds)
			resp.raise_for_status()
		except requests.RequestException as exc:
			raise RequestError(f"request to {self.name} failed: {exc}") from exc
		try:
			return resp.content.decode("utf-8")
		except UnicodeDecodeError as exc:
			raise DecodeError(f"{self.name} response is not valid UTF-8: {exc}") from exc

	def fetch(self, language: str) -> Quote:
		"""Fetch one quote in ``language`` ("en" or "ru")."""
		text = self.request_text(normalize_language(language))
		if self.needs_repair:
			text = repair_escapes(text)
		try:
			payload = json.loads(text)
		except json.JSONDecodeError as exc:
			raise ParseError(f"failed to deserialize JSON from {self.name}: {exc}") from exc
		try:
			quote = self.decode(payload)
		except ValidationError as exc:
			raise ParseError(f"unexpected {self.name} response: {exc}") from exc
		self.check(quote)
		return quote

	def check(self, quote: Quote) -> None:
		"""Reject quotes that cannot be shown: blank text or unencodable characters."""
		if not quote.text.strip():
			raise ParseError(f"{self.name} returned an empty quote")
		for value in (quote.text, quote.author or ""):
			try:
				value.encode("utf-8")
			except UnicodeEncodeError as exc:
				raise ParseError(f"{self.name} returned text that is not valid unicode: {exc}") from exc


# Forismatic: { quoteText, quoteAuthor, senderName, senderLink, quoteLink }
class _ForismaticPayload(BaseModel):
	quote_text: str = Field(alias="quoteText")
	quote_author: str = Field(alias="quoteAuthor")


class ForismaticSource(QuoteSource):
	name = "forismatic"
	base_url = "https://api.forismatic.com/api/1.0"
	needs_repair = True  # sends \' inside strings

	def build_request(self, language: str) -> tuple[str, Optional[Dict[str, str]]]:
		return self.base_url + "/", {"method": "getQuote", "format": "json", "lang": language}

	def decode(self, payload: object) -> Quote:
		data = _ForismaticPayload.model_validate(payload)
		return Quote.from_wire(data.quote_text, data.quote_author)


# Hapesire: { data: { attributes: { text, author } } }
class _HapesireAttributes(BaseModel):
	text: str
	author: Optional[str] = None


class _HapesireObject(BaseModel):
	attributes: _HapesireAttributes


class _HapesirePayload(BaseModel):
	data: _HapesireObject


class HapesireSource(QuoteSource):
	name = "hapesire"
	base_url = "https://hapesire.vercel.app/api/quotes/random"

	def build_request(self, language: str) -> tuple[str, Optional[Dict[str, str]]]:
		return f"{self.base_url}/{language}", None

	def decode(self, payload: object) -> Quote:
		attrs = _HapesirePayload.model_validate(payload).data.attributes
		return Quote.from_wire(attrs.text, attrs.author)


SOURCES: Dict[str, Type[QuoteSource]] = {
	ForismaticSource.name: ForismaticSource,
	HapesireSource.name: HapesireSource,
}
DEFAULT_SOURCE = ForismaticSource.name


def resolve_source(name: Optional[str]) -> Type[QuoteSource]:
	"""Look up a provider by name; unknown names fall back to the default."""
	key = (name or "").strip().lower()
	if not key:
		return SOURCES[DEFAULT_SOURCE]
	cls = SOURCES.get(key)
	if cls is None:
		print(f"[provider-unknown] '{name}', using {DEFAULT_SOURCE}", file=sys.stderr)
		return SOURCES[DEFAULT_SOURCE]
	return cls


def _source_url(config: QuoteConfig, cls: Type[QuoteSource]) -> Optional[str]:
	if cls is ForismaticSource:
		return config.forismatic_url
	if cls is HapesireSource:
		return config.hapesire_url
	return None


def fetch_quote(provider: Optional[str], language: str, config: Optional[QuoteConfig] = None) -> Quote:
	"""Pick the provider and fetch a single quote from it."""
	cls = resolve_source(provider)
	if config is None:
		return cls().fetch(language)
	source = cls(
		base_url=_source_url(config, cls),
		timeout_seconds=config.timeout_s,
		debug=config.debug,
	)
	return source.fetch(language)
