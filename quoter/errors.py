from __future__ import annotations


class QuoterError(Exception):
	"""Base class for every failure reported by the quote pipeline."""


class FetchError(QuoterError):
	"""Fetching or decoding a quote from a provider failed."""


class RequestError(FetchError):
	"""Transport failure: DNS, connect, TLS, timeout or a non-2xx status."""


class DecodeError(FetchError):
	"""Response body is not valid UTF-8."""


class ParseError(FetchError):
	"""Body is not JSON or does not match the provider's schema."""


class SerializeError(QuoterError):
	"""A quote could not be converted to JSON."""
