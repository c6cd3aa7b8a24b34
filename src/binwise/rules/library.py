# src/binwise/rules/library.py
"""
Bin-count and bin-width rules.

Each rule takes a dataset and returns the recommended number of bins (𝒌), or
for the width-based rules a record carrying the bin width (𝒉) as well.
All counts go through :func:`~binwise.stats.rounding.at_least_one`, so the
result is rounded up and never below one bin.

Most formulas follow Rubia, J.M.D.L. (2024): Rice University Rule to Determine
the Number of Bins. Open Journal of Statistics, 14, 119-149.
"""

from __future__ import annotations

import math

from ..errors import InvalidDataset
from ..logutil import get_logger
from ..stats.coerce import DataLike, coerce_vector
from ..stats.describe import (
	data_range,
	interquartile_range,
	population_skewness,
	sample_skewness,
	ses_population,
	ses_sample,
	standard_deviation,
)
from ..stats.rounding import at_least_one
from .results import FreedmanDiaconisResult, ScottResult

from ..imports import numpy as np  # type: ignore

LOG = get_logger(__name__)

__all__ = [
	"square_root", "sturges", "rice", "terrell_scott",
	"doane", "scott", "freedman_diaconis",
]


def _cbrt(n: int) -> float:
	"""Cube root of a count, exact for perfect cubes."""
	root = float(np.cbrt(n))
	nearest = round(root)
	if nearest ** 3 == n:
		return float(nearest)
	return root


def _nonempty(data: DataLike, rule: str) -> "np.ndarray":
	x = coerce_vector(data, dtype=float)
	if x.size == 0:
		raise InvalidDataset(f"Dataset cannot be empty to apply the {rule}.")
	return x


def square_root(data: DataLike) -> int:
	"""
	Square Root Rule, Karl Pearson (1892)::

		k = ⌈ √n ⌉
	"""
	n = _nonempty(data, "Square Root Rule").size
	k = at_least_one(math.sqrt(n))
	LOG.debug("square_root: n=%d k=%d", n, k)
	return k


def sturges(data: DataLike) -> int:
	"""
	Sturges' rule (1926)::

		k = 1 + ⌈ log₂(n) ⌉

	:raises InvalidDataset: if the dataset is empty
	"""
	n = _nonempty(data, "Sturges' Rule").size
	k = at_least_one(1 + math.ceil(math.log2(n)))
	LOG.debug("sturges: n=%d k=%d", n, k)
	return k


def rice(data: DataLike) -> int:
	"""
	Rice University Rule as taught by David M. Lane::

		k = 2 × ⌈ ∛n ⌉

	A single value yields two bins.
	"""
	n = _nonempty(data, "Rice Rule").size
	k = at_least_one(2 * math.ceil(_cbrt(n)))
	LOG.debug("rice: n=%d k=%d", n, k)
	return k


def terrell_scott(data: DataLike) -> int:
	"""
	Terrell-Scott rule (1985), the academic original of the Rice rule::

		k = ⌈ ∛(2n) ⌉
	"""
	n = _nonempty(data, "Terrell-Scott Rule").size
	k = at_least_one(_cbrt(2 * n))
	LOG.debug("terrell_scott: n=%d k=%d", n, k)
	return k


def doane(data: DataLike, population: bool = False) -> int:
	"""
	Doane's modification of Sturges' rule (1976) that accounts for skewness::

		k = 1 + ⌈ log₂(n) + log₂(1 + |√b1| / σ_√b1) ⌉

	The sample variant (default) uses the bias-corrected skewness ``G1`` with its
	matching standard error and suits small to moderate samples. The population
	variant uses Karl Pearson's ``√b1`` with Egon Sharpe Pearson's standard error
	and is most accurate for large samples.

	:param data: Dataset with at least three values.
	:param population: Use the population formulas for skewness and its error.
	:return: Recommended number of bins.
	:raises InvalidDataset: if the dataset contains fewer than 3 numbers
	"""
	x = coerce_vector(data, dtype=float)
	n = int(x.size)
	if n < 3:
		raise InvalidDataset("Dataset must contain at least 3 numbers to apply the Doane's Rule.")

	if population:
		b1 = population_skewness(x)
		ses = ses_population(n)
	else:
		b1 = sample_skewness(x)
		ses = ses_sample(n)

	# NaN skewness (overflowing moments) falls through to a single bin
	raw = math.log2(n) + math.log2(1 + abs(b1) / ses)
	k = at_least_one(1 + raw)
	LOG.debug("doane: n=%d skew=%.6g ses=%.6g population=%s k=%d", n, b1, ses, population, k)
	return k


def scott(data: DataLike) -> ScottResult:
	"""
	Scott's normal reference rule (1979)::

		h = 3.49 × s / ∛n
		k = ⌈ R / h ⌉,   R = max - min

	Equal values (``s == 0``) give ``h = 0`` and a single bin.

	:param data: Dataset.
	:return: :class:`ScottResult` with ``width``, ``bins``, ``range`` and ``stddev``.
	:raises InvalidDataset: if the dataset is empty
	"""
	x = _nonempty(data, "Scott's Rule")
	r = data_range(x)
	s = standard_deviation(x)
	if s == 0.0:
		h, k = 0.0, 1.0
	else:
		h = 3.49 * s / _cbrt(x.size)
		k = r / h

	result = ScottResult(width=h, bins=at_least_one(k), range=r, stddev=s)
	LOG.debug("scott: n=%d %s", x.size, result)
	return result


def freedman_diaconis(data: DataLike) -> FreedmanDiaconisResult:
	"""
	Freedman-Diaconis rule (1981)::

		h = 2 × IQR / ∛n
		k = ⌈ R / h ⌉,   R = max - min

	IQR uses inclusive quartiles. A zero IQR gives ``h = 0`` and a single bin.

	:param data: Dataset.
	:return: :class:`FreedmanDiaconisResult` with ``width``, ``bins``, ``range`` and ``iqr``.
	:raises InvalidDataset: if the dataset is empty
	"""
	x = _nonempty(data, "Freedman-Diaconis Rule")
	r = data_range(x)
	iqr = interquartile_range(x)
	if iqr == 0.0:
		h, k = 0.0, 1.0
	else:
		h = 2 * iqr / _cbrt(x.size)
		k = r / h

	result = FreedmanDiaconisResult(width=h, bins=at_least_one(k), range=r, iqr=iqr)
	LOG.debug("freedman_diaconis: n=%d %s", x.size, result)
	return result
