from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable

SERVICE_NAME = "receipt-points"


def _env(name: str, default: Any, cast: Callable[[str], Any]):
	raw = os.getenv(name)
	if raw is None:
		return default
	try:
		return cast(raw)
	except Exception as e:
		raise ValueError(
			f"env var {name!r}={raw!r} not valid for {cast.__name__}"
		) from e


# listener
HOST = _env("HOST", "0.0.0.0", str)
PORT = _env("PORT", 8080, int)

# observability
LOG_LEVEL = _env("LOG_LEVEL", "INFO", str)
OTLP_ENDPOINT = _env("OTLP_ENDPOINT", None, str)
# "json" or "text"; json by default once traces are exported
LOG_FORMAT = _env("LOG_FORMAT", "json" if OTLP_ENDPOINT else "text", str).lower()


@dataclass(frozen=True)
class Settings:
	service: str = SERVICE_NAME
	host: str = HOST
	port: int = PORT
	log_level: str = LOG_LEVEL
	json_logs: bool = LOG_FORMAT == "json"
	otlp_endpoint: str | None = OTLP_ENDPOINT


def load_settings() -> Settings:
	return Settings()
