from __future__ import annotations

import random
import time

# random suffix width in hex digits
SUFFIX_DIGITS = 8


def generate_id() -> str:
	"""Nanosecond timestamp followed by a random hex suffix.

	Not guaranteed unique and not meant to be unguessable; two ids only collide
	when both the timestamp and the 32-bit suffix match.
	"""
	suffix = random.getrandbits(SUFFIX_DIGITS * 4)
	return f"{time.time_ns()}{suffix:0{SUFFIX_DIGITS}x}"
