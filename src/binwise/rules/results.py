# src/binwise/rules/results.py

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator

__all__ = ["WidthResult", "ScottResult", "FreedmanDiaconisResult"]


@dataclass(frozen=True)
class WidthResult:
	"""
	Outcome of a rule that derives the bin count from a bin width.

	Attributes are also reachable by key (``result["bins"]``) so the records
	can stand in for plain dictionaries.
	"""

	width: float
	bins: int
	range: float

	# record key -> attribute name, where the two differ
	_KEYS = {}

	def _attr(self, key: str) -> str:
		attr = self._KEYS.get(key, key)
		if attr not in {f.name for f in fields(self)}:
			raise KeyError(key)
		return attr

	def __getitem__(self, key: str) -> Any:
		return getattr(self, self._attr(key))

	def __contains__(self, key: object) -> bool:
		if not isinstance(key, str):
			return False
		try:
			self._attr(key)
		except KeyError:
			return False
		return True

	def __iter__(self) -> Iterator[str]:
		return iter(self.keys())

	def keys(self):
		inverse = {v: k for k, v in self._KEYS.items()}
		return [inverse.get(f.name, f.name) for f in fields(self)]

	def as_dict(self) -> Dict[str, Any]:
		"""Plain dictionary using the record's key spelling."""
		return {key: self[key] for key in self.keys()}


@dataclass(frozen=True)
class ScottResult(WidthResult):
	"""Scott's rule: width, bins, range and the standard deviation it was built from."""

	stddev: float


@dataclass(frozen=True)
class FreedmanDiaconisResult(WidthResult):
	"""Freedman-Diaconis rule: width, bins, range and the interquartile range."""

	iqr: float

	_KEYS = {"IQR": "iqr"}
