from __future__ import annotations

import os
import shutil
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from dotenv import load_dotenv


DEFAULT_WRAP_WIDTH = 80
MIN_WRAP_WIDTH = 3  # two columns go to the enclosing quotation marks


def normalize_language(raw: Optional[str]) -> str:
	"""Map any user input to "en" or "ru" by prefix."""
	return "en" if (raw or "").strip().lower().startswith("en") else "ru"


def terminal_width() -> int:
	return shutil.get_terminal_size((DEFAULT_WRAP_WIDTH, 24)).columns


def _env_flag(name: str, default: bool = False) -> bool:
	return os.getenv(name, "true" if default else "false").strip().lower() in {"1", "true", "yes"}


class QuoteConfig(BaseModel):
	model_config = ConfigDict(frozen=True)

	# Presentation
	language: str = "en"
	ascii_quotation: bool = False
	no_colors: bool = False
	json_output: bool = False
	wrap_width: int = DEFAULT_WRAP_WIDTH

	# Backend
	provider: str = "forismatic"
	timeout_s: Optional[float] = None  # None lets requests block until done
	forismatic_url: Optional[str] = None  # default applied in source if None
	hapesire_url: Optional[str] = None
	debug: bool = False

	@field_validator("language", mode="before")
	@classmethod
	def _normalize_language(cls, value: Optional[str]) -> str:
		return normalize_language(value)

	@field_validator("wrap_width")
	@classmethod
	def _check_wrap_width(cls, value: int) -> int:
		if value < MIN_WRAP_WIDTH:
			raise ValueError(f"wrap width must be at least {MIN_WRAP_WIDTH}")
		return value

	@classmethod
	def load(cls, **overrides) -> "QuoteConfig":
		"""Build the config from the environment, then apply non-None overrides."""
		# Load .env if present
		load_dotenv(override=False)

		wrap_env = os.getenv("QUOTER_WRAP_WIDTH")
		values = dict(
			language=os.getenv("QUOTER_LANGUAGE", "en"),
			ascii_quotation=_env_flag("QUOTER_ASCII_QUOTATION"),
			no_colors=_env_flag("QUOTER_NO_COLORS") or bool(os.getenv("NO_COLOR")),
			json_output=_env_flag("QUOTER_JSON"),
			wrap_width=wrap_env or terminal_width(),
			provider=os.getenv("QUOTER_PROVIDER", "forismatic"),
			timeout_s=os.getenv("QUOTER_TIMEOUT_S") or None,
			forismatic_url=os.getenv("QUOTER_FORISMATIC_URL"),
			hapesire_url=os.getenv("QUOTER_HAPESIRE_URL"),
			debug=_env_flag("QUOTER_DEBUG"),
		)
		values.update({k: v for k, v in overrides.items() if v is not None})
		return cls(**values)
