# src/binwise/stats/__init__.py
"""
Descriptive statistics consumed by the binning rules.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	"coerce_vector",
	"data_range", "standard_deviation",
	"quartiles_inclusive", "interquartile_range",
	"sample_skewness", "population_skewness",
	"ses_sample", "ses_population",
	"describe_spread",
	"at_least_one",
]

_DESCRIBE = {
	"data_range", "standard_deviation",
	"quartiles_inclusive", "interquartile_range",
	"sample_skewness", "population_skewness",
	"ses_sample", "ses_population",
	"describe_spread",
}


def __getattr__(name: str):
	if name == "coerce_vector":
		return import_module("binwise.stats.coerce").coerce_vector
	if name == "at_least_one":
		return import_module("binwise.stats.rounding").at_least_one
	if name in _DESCRIBE:
		return getattr(import_module("binwise.stats.describe"), name)
	raise AttributeError(f"module 'binwise.stats' has no attribute {name!r}")


if TYPE_CHECKING:
	from .coerce import coerce_vector
	from .describe import (
		data_range, standard_deviation,
		quartiles_inclusive, interquartile_range,
		sample_skewness, population_skewness,
		ses_sample, ses_population,
		describe_spread,
	)
	from .rounding import at_least_one
