from __future__ import annotations


BAD_APOSTROPHE = "\\'"


def repair_escapes(raw: str) -> str:
	"""Replace the invalid JSON escape ``\\'`` with a bare apostrophe.

	Some providers (Forismatic) escape apostrophes the way a JS string literal
	would, which json.loads rejects. Nothing else in the payload is touched,
	so running it twice gives the same result as running it once.
	"""
	return raw.replace(BAD_APOSTROPHE, "'")
