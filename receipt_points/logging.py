from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace
from pythonjsonlogger import jsonlogger

from .config import SERVICE_NAME

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


class ServiceJSONFormatter(jsonlogger.JsonFormatter):
	"""JSON lines shaped for Loki: flat keys, lowercase level, trace ids."""

	def __init__(self, *args: Any, service: str = SERVICE_NAME, **kwargs: Any) -> None:
		super().__init__(*args, **kwargs)
		self.service = service

	def add_fields(
		self,
		log_record: dict[str, Any],
		record: logging.LogRecord,
		message_dict: dict[str, Any],
	):
		super().add_fields(log_record, record, message_dict)

		log_record["timestamp"] = datetime.fromtimestamp(
			record.created, timezone.utc
		).isoformat(timespec="milliseconds")
		log_record["level"] = record.levelname.lower()
		log_record["service"] = log_record.get("service") or self.service
		log_record["logger"] = record.name

		for key in ("levelname", "color_message", "asctime", "name"):
			log_record.pop(key, None)

		ctx = trace.get_current_span().get_span_context()
		if ctx.is_valid:
			log_record["trace_id"] = f"{ctx.trace_id:032x}"
			log_record["span_id"] = f"{ctx.span_id:016x}"

		return log_record


def configure_logging(
	service: str = SERVICE_NAME, json_mode: bool = False, level: str = "INFO"
) -> None:
	"""Install a single stdout handler on the root logger.

	Safe to call more than once; later calls leave the existing handler alone.
	"""
	root = logging.getLogger()
	if root.handlers:
		return

	handler = logging.StreamHandler(sys.stdout)
	if json_mode:
		handler.setFormatter(
			ServiceJSONFormatter(
				"%(timestamp)s %(level)s %(service)s %(message)s", service=service
			)
		)
	else:
		handler.setFormatter(
			logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s")
		)

	root.setLevel(level.upper())
	root.addHandler(handler)

	for name in _UVICORN_LOGGERS:
		ul = logging.getLogger(name)
		ul.handlers = [handler]
		ul.propagate = False
