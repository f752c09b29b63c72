from __future__ import annotations

import logging
from typing import Callable

from opentelemetry import trace

from . import rules
from .config import Settings
from .ids import generate_id
from .schemas import Receipt
from .store import ReceiptStore

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class ReceiptService:
	def __init__(
		self,
		settings: Settings,
		store: ReceiptStore | None = None,
		id_factory: Callable[[], str] = generate_id,
	) -> None:
		self.settings = settings
		self.store = store if store is not None else ReceiptStore()
		self._new_id = id_factory

	def process(self, receipt: Receipt) -> str:
		"""Score a receipt, store it, and return its new id."""
		with tracer.start_as_current_span("service.process") as span:
			receipt_id = self._new_id()
			parts = rules.breakdown(receipt)
			points = sum(parts.values())

			self.store.put(receipt_id, receipt, points)

			span.set_attribute("receipt.id", receipt_id)
			span.set_attribute("items.count", len(receipt.items))
			span.set_attribute("points", points)

		log.debug("points breakdown", extra={"receipt_id": receipt_id, **parts})
		log.info(
			"receipt processed",
			extra={"receipt_id": receipt_id, "points": points},
		)
		return receipt_id

	def points(self, receipt_id: str) -> int:
		"""Points for a stored receipt; raises KeyError for an unknown id."""
		with tracer.start_as_current_span("service.points") as span:
			span.set_attribute("receipt.id", receipt_id)
			points = self.store.get_points(receipt_id)
			span.set_attribute("receipt.found", points is not None)

		if points is None:
			raise KeyError(receipt_id)
		return points
