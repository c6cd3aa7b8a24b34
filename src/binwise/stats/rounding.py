# src/binwise/stats/rounding.py

from __future__ import annotations

import math

from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = ["at_least_one"]


def at_least_one(k: float) -> int:
	"""
	Normalize a raw bin count: round up, never below one bin.

	Rounding is always toward positive infinity so a fractional count such as
	``4.2`` becomes ``5`` bins, never ``4``. Non-positive counts collapse to ``1``.
	A non-finite raw count (NaN/inf from degenerate input) is reported and also
	collapses to ``1``.

	:param k: Raw bin count produced by a rule.
	:return: Integer bin count ``>= 1``.
	"""
	k = float(k)
	if not math.isfinite(k):
		LOG.warning("Non-finite raw bin count %r; falling back to a single bin.", k)
		return 1
	return max(1, int(math.ceil(k)))
