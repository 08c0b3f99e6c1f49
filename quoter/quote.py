from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from .errors import SerializeError


class Quote(BaseModel):
	"""A quote as decoded from a provider.

	Text and author are kept as the provider sent them; trimming and
	quotation handling happen in the presenter.
	"""

	text: str
	author: Optional[str] = None

	@classmethod
	def from_wire(cls, text: str, author: Optional[str]) -> "Quote":
		# empty string and missing author both mean "no author"
		return cls(text=text, author=author if author else None)

	def trimmed(self) -> "Quote":
		author = self.author.strip() if self.author else ""
		return Quote(text=self.text.strip(), author=author or None)

	def to_json(self) -> str:
		try:
			return self.model_dump_json()
		except PydanticSerializationError as exc:
			raise SerializeError("failed to serialize quote to JSON") from exc
