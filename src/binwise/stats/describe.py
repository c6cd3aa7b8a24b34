# src/binwise/stats/describe.py

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple, Union

from ..errors import InvalidDataset
from ..logutil import get_logger
from .coerce import DataLike, coerce_vector

from ..imports import numpy as np  # type: ignore
from ..imports import scipy as sp  # type: ignore

LOG = get_logger(__name__)

__all__ = [
	"data_range", "standard_deviation",
	"quartiles_inclusive", "interquartile_range",
	"sample_skewness", "population_skewness",
	"ses_sample", "ses_population",
	"describe_spread",
]


def _vector(data: DataLike, what: str) -> "np.ndarray":
	x = coerce_vector(data, dtype=float)
	if x.size == 0:
		raise InvalidDataset(f"Dataset cannot be empty to compute the {what}.")
	return x


def _is_constant(x: "np.ndarray") -> bool:
	return bool(x.max() == x.min())


def data_range(data: DataLike) -> float:
	"""Spread between the largest and smallest value, ``max - min``."""
	x = _vector(data, "range")
	with np.errstate(over="ignore"):
		return float(x.max() - x.min())


def standard_deviation(data: DataLike, *, population: bool = False) -> float:
	"""
	Standard deviation of the dataset.

	:param data: Dataset.
	:param population: Use the population formula (ddof=0) instead of the sample one (ddof=1).
	:return: Standard deviation; exactly ``0.0`` for equal values or a single sample value.
	"""
	x = _vector(data, "standard deviation")
	if _is_constant(x) or (not population and x.size < 2):
		return 0.0
	with np.errstate(over="ignore", invalid="ignore"):
		return float(np.std(x, ddof=0 if population else 1))


def _median_sorted(x: "np.ndarray") -> float:
	n = x.size
	mid = n // 2
	if n % 2:
		return float(x[mid])
	return float((x[mid - 1] + x[mid]) / 2.0)


def quartiles_inclusive(data: DataLike) -> Tuple[float, float, float]:
	"""
	First quartile, median and third quartile using the inclusive method.

	The sorted data is split in two halves. For an odd count the median belongs
	to both halves. Q1 and Q3 are the medians of the lower and upper half
	(Tukey's hinges).

	>>> quartiles_inclusive([1, 2, 3, 4, 5, 6, 7, 8, 9])
	(3.0, 5.0, 7.0)
	>>> quartiles_inclusive([1, 2, 3, 4, 5, 6, 7, 8])
	(2.5, 4.5, 6.5)

	:param data: Dataset.
	:return: ``(q1, median, q3)``.
	"""
	x = np.sort(_vector(data, "quartiles"))
	n = x.size
	half = n // 2
	if n % 2:
		lower, upper = x[:half + 1], x[half:]
	else:
		lower, upper = x[:half], x[half:]
	return _median_sorted(lower), _median_sorted(x), _median_sorted(upper)


def interquartile_range(data: DataLike) -> float:
	"""``Q3 - Q1`` from :func:`quartiles_inclusive`; exactly ``0.0`` for equal values."""
	x = _vector(data, "interquartile range")
	if _is_constant(x):
		return 0.0
	q1, _, q3 = quartiles_inclusive(x)
	return float(q3 - q1)


def _skewness(data: DataLike, *, bias: bool) -> float:
	x = _vector(data, "skewness")
	if _is_constant(x):
		# third standardized moment is 0/0 here; equal values are not skewed
		return 0.0
	with np.errstate(over="ignore", invalid="ignore"):
		return float(sp.stats.skew(x, bias=bias))


def sample_skewness(data: DataLike) -> float:
	"""
	Adjusted Fisher-Pearson skewness ``G1 = g1 * sqrt(n(n-1)) / (n-2)``.

	Corrects ``g1`` for bias in small to moderate samples. Meaningful for ``n >= 3``.
	"""
	return _skewness(data, bias=False)


def population_skewness(data: DataLike) -> float:
	"""Karl Pearson's moment coefficient ``sqrt(b1) = g1 = m3 / m2**1.5``."""
	return _skewness(data, bias=True)


def _check_ses_size(n: int) -> None:
	if n < 3:
		raise InvalidDataset(
			f"Standard error of skewness requires at least 3 numbers, got {n}."
		)


def ses_sample(n: int) -> float:
	"""
	Standard error of the sample skewness ``G1``::

		sqrt( 6n(n-1) / ((n-2)(n+1)(n+3)) )
	"""
	_check_ses_size(n)
	return math.sqrt((6 * n * (n - 1)) / ((n - 2) * (n + 1) * (n + 3)))


def ses_population(n: int) -> float:
	"""
	Egon Sharpe Pearson's standard error of ``sqrt(b1)`` for a normal variable::

		sqrt( 6(n-2) / ((n+1)(n+3)) )
	"""
	_check_ses_size(n)
	return math.sqrt((6 * (n - 2)) / ((n + 1) * (n + 3)))


def describe_spread(
		data: DataLike,
		*,
		population: bool = False,
		column: Optional[Union[int, str]] = None
) -> Dict[str, Union[int, float]]:
	"""
	Every statistic the binning rules consume, in one dictionary.

	:param data: Dataset.
	:param population: Use the population variants of standard deviation and skewness.
	:param column: Column name or index for DataFrame input.
	:return: n, min, max, range, std, q1, median, q3, iqr and, for ``n >= 3``,
			 skewness and ses.
	"""
	x = coerce_vector(data, column=column, dtype=float)
	if x.size == 0:
		raise InvalidDataset("Dataset cannot be empty to describe its spread.")
	q1, med, q3 = quartiles_inclusive(x)
	out: Dict[str, Union[int, float]] = {
		"n": int(x.size),
		"min": float(x.min()),
		"max": float(x.max()),
		"range": data_range(x),
		"std": standard_deviation(x, population=population),
		"q1": q1,
		"median": med,
		"q3": q3,
		"iqr": interquartile_range(x),
	}
	if x.size >= 3:
		if population:
			out["skewness"] = population_skewness(x)
			out["ses"] = ses_population(int(x.size))
		else:
			out["skewness"] = sample_skewness(x)
			out["ses"] = ses_sample(int(x.size))
	return out
