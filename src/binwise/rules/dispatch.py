# src/binwise/rules/dispatch.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Literal, Optional, Union

from ..errors import InvalidDataset, UnknownRule
from ..logutil import get_logger
from ..stats.coerce import DataLike, coerce_vector
from ..stats.describe import describe_spread
from . import library
from .results import WidthResult

if TYPE_CHECKING:
	from ..config.settings import BinningSettings

LOG = get_logger(__name__)

__all__ = [
	"RuleName",
	"SQUARE_ROOT", "PEARSON", "STURGES", "DOANE", "SCOTT",
	"FREEDMAN_DIACONIS", "TERRELL_SCOTT", "RICE", "DEFAULT",
	"RULES", "WIDTH_RULES",
	"resolve_rule", "suggest_bins", "suggest_bin_width", "suggest_all",
	"BinSelection",
]

RuleName = Literal[
	"square_root", "pearson", "sturges", "doane", "scott",
	"freedman_diaconis", "terrell_scott", "rice", "default",
]

SQUARE_ROOT = "square_root"
PEARSON = "pearson"
STURGES = "sturges"
DOANE = "doane"
SCOTT = "scott"
FREEDMAN_DIACONIS = "freedman_diaconis"
TERRELL_SCOTT = "terrell_scott"
RICE = "rice"
DEFAULT = "default"

BinRule = Callable[..., Union[int, WidthResult]]

_BIN_RULES: Dict[str, BinRule] = {
	SQUARE_ROOT: library.square_root,
	PEARSON: library.square_root,
	STURGES: library.sturges,
	DOANE: library.doane,
	SCOTT: library.scott,
	FREEDMAN_DIACONIS: library.freedman_diaconis,
	TERRELL_SCOTT: library.terrell_scott,
	RICE: library.rice,
	DEFAULT: library.freedman_diaconis,
}

_WIDTH_RULES: Dict[str, Callable[[DataLike], WidthResult]] = {
	SCOTT: library.scott,
	FREEDMAN_DIACONIS: library.freedman_diaconis,
	DEFAULT: library.freedman_diaconis,
}

RULES = tuple(_BIN_RULES)
WIDTH_RULES = tuple(_WIDTH_RULES)

# one entry per formula, aliases excluded
_CANONICAL = (SQUARE_ROOT, STURGES, RICE, TERRELL_SCOTT, DOANE, SCOTT, FREEDMAN_DIACONIS)

_CAMEL = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _normalize(rule: str) -> str:
	return _CAMEL.sub("_", rule.strip()).replace("-", "_").lower()


def resolve_rule(rule: str) -> str:
	"""
	Map a rule identifier to its table key.

	``freedmanDiaconis``, ``freedman-diaconis`` and ``freedman_diaconis`` all
	resolve to ``"freedman_diaconis"``. Aliases (``pearson``, ``default``) are
	kept as given; they share their target's formula in the dispatch tables.

	:raises UnknownRule: For identifiers outside the supported set.
	"""
	if not isinstance(rule, str):
		raise UnknownRule(rule)
	key = _normalize(rule)
	if key not in _BIN_RULES:
		raise UnknownRule(rule)
	return key


def suggest_bins(data: DataLike, rule: str = DEFAULT, *, population: bool = False) -> int:
	"""
	Suggest a number of bins (𝒌).

	Per default the Freedman-Diaconis rule is used.

	:param data: Dataset.
	:param rule: Rule identifier, see :data:`RULES`.
	:param population: Doane's rule only: use the population skewness formulas.
	:return: Recommended number of bins.
	:raises UnknownRule: If ``rule`` is not supported.
	:raises InvalidDataset: If the dataset is too small for the rule.
	"""
	key = resolve_rule(rule)
	fn = _BIN_RULES[key]
	out = fn(data, population=population) if key == DOANE else fn(data)
	bins = out.bins if isinstance(out, WidthResult) else out
	LOG.debug("suggest_bins(rule=%s) -> %d", key, bins)
	return int(bins)


def suggest_bin_width(data: DataLike, rule: str = DEFAULT) -> float:
	"""
	Suggest a bin width (𝒉).

	Only the width-based rules (:data:`WIDTH_RULES`) apply; count-only rules
	such as ``sturges`` are rejected like any unknown identifier.

	:raises UnknownRule: If ``rule`` has no width definition.
	"""
	key = _normalize(rule) if isinstance(rule, str) else None
	if key not in _WIDTH_RULES:
		raise UnknownRule(rule)
	width = float(_WIDTH_RULES[key](data).width)
	LOG.debug("suggest_bin_width(rule=%s) -> %g", key, width)
	return width


def suggest_all(data: DataLike, *, population: bool = False) -> Dict[str, int]:
	"""
	Evaluate every rule over the same dataset.

	Doane's rule is left out for fewer than three values.

	:return: Mapping of canonical rule name to bin count.
	:raises InvalidDataset: If the dataset is empty.
	"""
	x = coerce_vector(data, dtype=float)
	if x.size == 0:
		raise InvalidDataset("Dataset cannot be empty to suggest bins.")
	out: Dict[str, int] = {}
	for key in _CANONICAL:
		if key == DOANE and x.size < 3:
			LOG.debug("suggest_all: skipping %s for n=%d", key, x.size)
			continue
		out[key] = suggest_bins(x, key, population=population)
	return out


@dataclass
class BinSelection:
	"""
	Thin stateful wrapper around the rule functions.

	Examples
	--------
	>>> sel = BinSelection(list(range(1, 101)))
	>>> sel.bins("sturges")
	8
	>>> sel.bins() == sel.freedman_diaconis().bins
	True

	Notes
	-----
	- ``rule`` and ``population`` act as defaults for :meth:`bins` and :meth:`width`.
	- For stateless use, call :func:`suggest_bins` / :func:`suggest_bin_width` directly.
	"""

	data: DataLike
	rule: str = DEFAULT
	population: bool = False

	def __post_init__(self) -> None:
		self.rule = resolve_rule(self.rule)

	@classmethod
	def from_settings(cls, data: DataLike, settings: "BinningSettings") -> "BinSelection":
		"""Build a selection whose defaults come from loaded settings."""
		return cls(data, rule=settings.rule, population=settings.population)

	def bins(self, rule: Optional[str] = None) -> int:
		return suggest_bins(self.data, self.rule if rule is None else rule, population=self.population)

	def width(self, rule: Optional[str] = None) -> float:
		return suggest_bin_width(self.data, self.rule if rule is None else rule)

	def all(self) -> Dict[str, int]:
		return suggest_all(self.data, population=self.population)

	def scott(self):
		return library.scott(self.data)

	def freedman_diaconis(self):
		return library.freedman_diaconis(self.data)

	def describe(self) -> Dict[str, Union[int, float]]:
		"""Statistics the rules are built from (range, std, quartiles, skewness)."""
		return describe_spread(self.data, population=self.population)
