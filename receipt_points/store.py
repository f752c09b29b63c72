from __future__ import annotations

import threading
from typing import Dict

from .schemas import Receipt


class ReceiptStore:
	"""In-memory receipts and their points, keyed by id.

	One lock guards both maps so a put becomes visible to readers as a whole.
	Entries live for the lifetime of the process.
	"""

	def __init__(self) -> None:
		self._lock = threading.Lock()
		self._receipts: Dict[str, Receipt] = {}
		self._points: Dict[str, int] = {}

	def put(self, receipt_id: str, receipt: Receipt, points: int) -> None:
		# last write wins on an id collision
		with self._lock:
			self._receipts[receipt_id] = receipt
			self._points[receipt_id] = points

	def get_points(self, receipt_id: str) -> int | None:
		with self._lock:
			return self._points.get(receipt_id)

	def get_receipt(self, receipt_id: str) -> Receipt | None:
		with self._lock:
			return self._receipts.get(receipt_id)

	def __contains__(self, receipt_id: object) -> bool:
		with self._lock:
			return receipt_id in self._points

	def __len__(self) -> int:
		with self._lock:
			return len(self._points)
