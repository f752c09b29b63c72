"""Points rules for a submitted receipt.

Every rule takes a validated :class:`Receipt` and returns a non-negative
integer. A malformed date or time inside an otherwise valid receipt means the
rule does not apply, so rules return 0 instead of raising.
"""
from __future__ import annotations

import re
from datetime import time
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import Callable

from .schemas import Receipt

Rule = Callable[[Receipt], int]

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTERS_PER_DOLLAR = 4
DESCRIPTION_MULTIPLIER = Decimal("0.2")
DESCRIPTION_LENGTH_DIVISOR = 3

# exclusive bounds
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_CLOCK = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def retailer_alphanumerics(receipt: Receipt) -> int:
	return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())


def _exact_product(value: Decimal, factor: Decimal | int) -> Decimal:
	"""``value * factor`` with enough precision that nothing is rounded."""
	with localcontext() as ctx:
		ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 2)
		return value * factor


def round_dollar_total(receipt: Receipt) -> int:
	total = receipt.total
	return ROUND_DOLLAR_POINTS if total == total.to_integral_value() else 0


def quarter_multiple_total(receipt: Receipt) -> int:
	# whole exactly when total is a multiple of 0.25
	quarters = _exact_product(receipt.total, QUARTERS_PER_DOLLAR)
	return QUARTER_MULTIPLE_POINTS if quarters == quarters.to_integral_value() else 0


def item_pairs(receipt: Receipt) -> int:
	return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_length(receipt: Receipt) -> int:
	points = 0
	for item in receipt.items:
		# a blank description trims to length 0, which also qualifies
		if len(item.short_description.strip()) % DESCRIPTION_LENGTH_DIVISOR == 0:
			bonus = _exact_product(item.price, DESCRIPTION_MULTIPLIER).to_integral_value(
				rounding=ROUND_CEILING
			)
			points += int(bonus)
	return points


def parse_day(purchase_date: str) -> int | None:
	"""Day of month from ``YYYY-MM-DD``; ``None`` when it isn't an integer."""
	fields = purchase_date.split("-")
	if len(fields) < 3 or not _INTEGER.fullmatch(fields[2]):
		return None
	return int(fields[2])


def odd_purchase_day(receipt: Receipt) -> int:
	day = parse_day(receipt.purchase_date)
	if day is None or day % 2 == 0:
		return 0
	return ODD_DAY_POINTS


def parse_clock(purchase_time: str) -> time | None:
	"""24-hour ``HH:MM`` (single-digit hour allowed) or ``None``."""
	m = _CLOCK.fullmatch(purchase_time)
	if not m:
		return None
	hour, minute = int(m.group(1)), int(m.group(2))
	if hour > 23 or minute > 59:
		return None
	return time(hour, minute)


def afternoon_window(receipt: Receipt) -> int:
	at = parse_clock(receipt.purchase_time)
	if at is not None and AFTERNOON_START < at < AFTERNOON_END:
		return AFTERNOON_POINTS
	return 0


RULES: dict[str, Rule] = {
	"retailer_alphanumerics": retailer_alphanumerics,
	"round_dollar_total": round_dollar_total,
	"quarter_multiple_total": quarter_multiple_total,
	"item_pairs": item_pairs,
	"description_length": description_length,
	"odd_purchase_day": odd_purchase_day,
	"afternoon_window": afternoon_window,
}


def breakdown(receipt: Receipt) -> dict[str, int]:
	return {name: rule(receipt) for name, rule in RULES.items()}


def score(receipt: Receipt) -> int:
	return sum(breakdown(receipt).values())
